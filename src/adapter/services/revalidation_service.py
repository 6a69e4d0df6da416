"""Revalidation Service Implementations

Provides concrete implementations for invalidating cached pages.
"""

import logging
from typing import Optional
import httpx
import redis.asyncio as redis
from redis.exceptions import RedisError
from src.app.services.revalidation_service import RevalidationService

logger = logging.getLogger(__name__)


class LoggingRevalidationService(RevalidationService):
    """
    Revalidation service that only logs the path

    Useful for development and testing, or when pages are not cached.
    """

    async def revalidate_path(self, path: str) -> bool:
        logger.info(f"[REVALIDATE] Path: {path}")
        return True


class RedisRevalidationService(RevalidationService):
    """
    Revalidation service that drops the cached page from Redis

    Rendered pages are cached under "<key_prefix><path>".
    """

    def __init__(self, client: redis.Redis, key_prefix: str = "page:"):
        """
        Initialize Redis revalidation service

        Args:
            client: Async Redis client
            key_prefix: Prefix of cached page keys
        """
        self.client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, redis_url: str, key_prefix: str = "page:") -> "RedisRevalidationService":
        return cls(redis.from_url(redis_url), key_prefix=key_prefix)

    def cache_key(self, path: str) -> str:
        return f"{self.key_prefix}{path}"

    async def revalidate_path(self, path: str) -> bool:
        """
        Delete the cached rendering of a path

        A missing key counts as success: there is nothing stale to serve.

        Args:
            path: URL path to revalidate

        Returns:
            True if Redis accepted the delete, False otherwise
        """
        key = self.cache_key(path)
        try:
            removed = await self.client.delete(key)
            logger.info(f"Revalidated {path} (redis key {key}, removed={removed})")
            return True
        except RedisError as e:
            logger.error(f"Failed to revalidate {path} in redis: {e}")
            return False


class WebhookRevalidationService(RevalidationService):
    """
    Revalidation service that calls an on-demand revalidation endpoint

    Sends {"path": ..., "secret": ...} to the rendering layer.
    """

    def __init__(self, webhook_url: str, secret: Optional[str] = None, timeout: float = 10.0):
        """
        Initialize webhook revalidation service

        Args:
            webhook_url: URL to POST revalidation requests to
            secret: Optional shared secret included in the payload
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.secret = secret
        self.timeout = timeout

    async def revalidate_path(self, path: str) -> bool:
        payload = {"path": path}
        if self.secret:
            payload["secret"] = self.secret

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(f"Revalidation webhook accepted {path} at {self.webhook_url}")
                return True
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to revalidate {path} via webhook: {e}")
            return False


class CompositeRevalidationService(RevalidationService):
    """
    Revalidation service that delegates to multiple services

    Useful when pages are cached in more than one place (e.g. redis + CDN).
    """

    def __init__(self, services: list[RevalidationService]):
        self.services = services

    async def revalidate_path(self, path: str) -> bool:
        """
        Revalidate the path with every configured service

        Returns:
            True if at least one service succeeded, False otherwise
        """
        success = False
        for service in self.services:
            if await service.revalidate_path(path):
                success = True
        return success


def create_revalidation_service(
    backend: str = "log",
    redis_url: Optional[str] = None,
    key_prefix: str = "page:",
    webhook_url: Optional[str] = None,
    webhook_secret: Optional[str] = None,
) -> RevalidationService:
    """
    Factory function to create appropriate revalidation service

    Args:
        backend: "redis" to drop cached pages from Redis, "log" to only log
        redis_url: Redis connection URL (required for the redis backend)
        key_prefix: Prefix of cached page keys in Redis
        webhook_url: Optional on-demand revalidation URL, added alongside the backend
        webhook_secret: Optional secret sent to the webhook

    Returns:
        Configured RevalidationService
    """
    if backend == "redis":
        if not redis_url:
            raise ValueError("redis_url is required for the redis cache backend")
        services: list[RevalidationService] = [
            RedisRevalidationService.from_url(redis_url, key_prefix=key_prefix)
        ]
    elif backend == "log":
        services = [LoggingRevalidationService()]
    else:
        raise ValueError(f"Unknown cache backend: {backend}")

    if webhook_url:
        services.append(WebhookRevalidationService(webhook_url, secret=webhook_secret))

    if len(services) == 1:
        return services[0]

    return CompositeRevalidationService(services)
