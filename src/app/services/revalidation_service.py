"""Revalidation Service Interface

Defines the contract for discarding cached renderings of a page path.
"""

from abc import ABC, abstractmethod


class RevalidationService(ABC):
    """
    Abstract service for invalidating cached pages

    Implementations can invalidate via:
    - Redis (drop the cached page key)
    - Webhook (on-demand revalidation endpoint of the rendering layer)
    - Logging only (development)
    """

    @abstractmethod
    async def revalidate_path(self, path: str) -> bool:
        """
        Discard any cached rendering of the given path

        Args:
            path: URL path to revalidate (e.g. /dashboard/invoices)

        Returns:
            True if the invalidation was applied, False otherwise
        """
        pass
