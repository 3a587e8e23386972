"""Subscriber records stored by :class:`~custom_events.event.CustomEvent`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(slots=True, eq=False)
class Subscriber:
    """A registered callback with its optional payload and context policy.

    ``override_context`` selects the execution context handed to the callback:
    ``True`` uses ``payload``, any other truthy object is used as-is, and
    anything else falls back to the event's default context.
    """

    callback: Callable[..., Any] | None
    payload: Any = None
    override_context: Any = None

    def resolve_context(self, default_context: Any) -> Any:
        if self.override_context:
            if self.override_context is True:
                return self.payload
            return self.override_context
        return default_context

    def matches(self, callback: Callable[..., Any], payload: Any = None) -> bool:
        """Return True if ``callback`` (and ``payload`` when given) match this subscriber."""

        if self.callback is None or self.callback != callback:
            return False
        if payload:
            return self.payload is payload or self.payload == payload
        return True

    def detach(self) -> None:
        self.callback = None
        self.payload = None
        self.override_context = None

    @property
    def detached(self) -> bool:
        return self.callback is None

    def __str__(self) -> str:
        return f"Subscriber {{ obj: {self.payload}, overrideContext: {self.override_context or 'no'} }}"
