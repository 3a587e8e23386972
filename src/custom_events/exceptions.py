"""Custom exceptions raised by the custom events package."""

from __future__ import annotations

from typing import Any


class EventError(RuntimeError):
    """Base error for all event related exceptions."""


class ConfigurationError(EventError):
    """Raised when configuration values are invalid or missing."""


class InvalidCallbackError(EventError, TypeError):
    """Raised when a subscription is attempted without a callable."""


class SubscriberExecutionError(EventError):
    """Wraps an exception raised by a subscriber while it was being notified."""

    def __init__(self, event_name: str, subscriber: Any, original: BaseException) -> None:
        super().__init__(f"Subscriber of '{event_name}' raised {original!r}")
        self.event_name = event_name
        self.subscriber = subscriber
        self.original = original
