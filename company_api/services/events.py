"""Change notifications published to Redis pub/sub."""

import logging
from enum import StrEnum
from typing import Protocol

import redis

from company_api.config import Settings

logger = logging.getLogger(__name__)


class CompanyEventTopic(StrEnum):
    """Channels carrying company change notifications."""

    COMPANY_UPDATE = "company_update"
    COMPANY_DELETE = "company_delete"


class EventPublisher(Protocol):
    """Fire-and-forget publish capability.

    Implementations should not raise; callers still treat a raise as a lost
    message rather than a failed mutation.
    """

    def publish(self, topic: str, message: str) -> None: ...


class RedisEventPublisher:
    """Publishes messages to Redis channels named after the topic."""

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self._client: redis.Redis | None = None

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.from_url(self.redis_url)
        return self._client

    def publish(self, topic: str, message: str) -> None:
        """Publish a message; delivery failures are logged, never raised."""
        try:
            self.client.publish(topic, message)
            logger.debug(f"Published to {topic}")
        except Exception as e:
            # Don't fail the request if pub/sub fails
            logger.error(f"Failed to publish to {topic}: {e}")


class NullEventPublisher:
    """Drops every message. Used when no Redis URL is configured."""

    def publish(self, topic: str, message: str) -> None:
        logger.debug(f"Notifications disabled, dropping message for {topic}")


def create_publisher(settings: Settings) -> EventPublisher:
    """Build the publisher the settings ask for."""
    if settings.redis_url:
        return RedisEventPublisher(settings.redis_url)
    return NullEventPublisher()
