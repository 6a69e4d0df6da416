"""Effect interpretation

Applies the effects returned by invoice use cases to an HTTP response:
refresh effects revalidate cached pages, a redirect effect becomes a
303 See Other.
"""

import logging
from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from src.app.services.revalidation_service import RevalidationService
from src.app.use_cases.invoices.dtos import EffectKind, InvoiceActionResponseDTO

logger = logging.getLogger(__name__)


async def apply_effects(
    response: InvoiceActionResponseDTO,
    revalidation_service: RevalidationService,
) -> Response:
    """
    Apply effects in order and build the HTTP response

    A failed revalidation is logged but does not fail the request; the
    mutation is already committed.

    Args:
        response: Successful use case output
        revalidation_service: Service invalidating cached pages

    Returns:
        RedirectResponse if a redirect effect is present, JSON message otherwise
    """
    redirect_to = None

    for effect in response.effects:
        if effect.kind == EffectKind.REFRESH:
            if not await revalidation_service.revalidate_path(effect.path):
                logger.warning(f"Cached page {effect.path} could not be revalidated")
        elif effect.kind == EffectKind.REDIRECT:
            redirect_to = effect.path

    if redirect_to is not None:
        return RedirectResponse(url=redirect_to, status_code=status.HTTP_303_SEE_OTHER)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=response.model_dump(mode="json", exclude={"effects"}),
    )
