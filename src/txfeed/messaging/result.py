"""
Publish outcome values returned by messaging clients.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from txfeed.exceptions import PublishError


@dataclass(frozen=True)
class PublishResult:
    """Success, or a failure carrying the client's ``PublishError``."""

    error: Optional[PublishError] = None
    metadata: Optional[Any] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, metadata: Any = None) -> "PublishResult":
        return cls(metadata=metadata)

    @classmethod
    def failed(cls, error: PublishError) -> "PublishResult":
        return cls(error=error)


class MessagingClient(Protocol):
    """The single operation the publisher needs from a message bus."""

    def publish(self, topic: str, payload: str) -> PublishResult: ...
