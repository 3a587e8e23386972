"""Synchronous publish/subscribe events."""

from .config import EventSettings, build_settings_from_dict
from .event import SUBSCRIBE_EVENT_TYPE, CustomEvent, Signature, current_context
from .exceptions import (
    ConfigurationError,
    EventError,
    InvalidCallbackError,
    SubscriberExecutionError,
)
from .subscriber import Subscriber

__all__ = [
    "ConfigurationError",
    "CustomEvent",
    "EventError",
    "EventSettings",
    "InvalidCallbackError",
    "SUBSCRIBE_EVENT_TYPE",
    "Signature",
    "Subscriber",
    "SubscriberExecutionError",
    "build_settings_from_dict",
    "current_context",
]
