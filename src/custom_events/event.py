"""Synchronous custom events with ordered, isolated subscriber notification."""

from __future__ import annotations

from contextvars import ContextVar
from enum import IntEnum
from typing import Any, Callable, List, Sequence, Tuple

from .config import EventSettings
from .exceptions import InvalidCallbackError, SubscriberExecutionError
from .logging import Diagnostics, log_diagnostic
from .subscriber import Subscriber

SUBSCRIBE_EVENT_TYPE = "_YUICEOnSubscribe"

_CURRENT_CONTEXT: ContextVar[Any] = ContextVar("custom_events_context", default=None)


def current_context() -> Any:
    """Return the execution context of the subscriber currently being notified."""

    return _CURRENT_CONTEXT.get()


class Signature(IntEnum):
    """Argument shape delivered to subscribers.

    ``LIST`` callbacks receive ``(event_name, args, payload)`` where ``args`` is
    the list of everything passed to :meth:`CustomEvent.fire`. ``FLAT``
    callbacks receive ``(first_arg, payload)``; pass a tuple or mapping as the
    single argument when more than one value is needed.
    """

    LIST = 0
    FLAT = 1


class CustomEvent:
    """A named event that independent subscribers can listen to.

    Subscribers are notified synchronously in subscription order. A subscriber
    returning exactly ``False`` stops delivery for that call to :meth:`fire`.
    Exceptions raised by subscribers are captured in :attr:`last_error` and
    reported through ``diagnostics``; they are re-raised only when
    ``settings.throw_errors`` is enabled.

    Fire-once events deliver a single firing. Later calls to :meth:`fire` are
    no-ops and subscribers arriving afterwards are notified immediately with
    the arguments of that firing.
    """

    def __init__(
        self,
        name: str,
        context: Any,
        silent: bool = False,
        signature: Signature | int | None = Signature.LIST,
        fire_once: bool = False,
        *,
        settings: EventSettings | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.name = name
        self.context = context
        self.silent = bool(silent)
        self.signature = Signature(signature or Signature.LIST)
        self.fire_once = bool(fire_once)
        self.fired = False
        self.fired_with: Tuple[Any, ...] | None = None
        self.subscribers: List[Subscriber] = []
        self.last_error: SubscriberExecutionError | None = None
        self.settings = settings if settings is not None else EventSettings.from_env()
        self.diagnostics: Diagnostics = diagnostics or log_diagnostic

        if not self.silent:
            self.diagnostics(f"Creating {self}", "info", "Event")

        # The notifier of a notifier would recurse forever.
        self.subscribe_event: CustomEvent | None = None
        if name != SUBSCRIBE_EVENT_TYPE:
            self.subscribe_event = CustomEvent(
                SUBSCRIBE_EVENT_TYPE,
                self,
                True,
                settings=self.settings,
                diagnostics=self.diagnostics,
            )

    def subscribe(
        self,
        callback: Callable[..., Any],
        payload: Any = None,
        override_context: Any = None,
    ) -> None:
        """Register ``callback`` to be notified when the event fires.

        ``payload`` is passed back to the callback on every notification.
        ``override_context`` of ``True`` makes ``payload`` the execution
        context; any other truthy object becomes the context itself.
        """

        if not callback:
            raise InvalidCallbackError(f"Invalid callback for subscriber to '{self.name}'")

        if self.subscribe_event is not None:
            self.subscribe_event.fire(callback, payload, override_context)

        subscriber = Subscriber(callback, payload, override_context)

        if self.fire_once and self.fired:
            self.notify(subscriber, self.fired_with or ())
        else:
            self.subscribers.append(subscriber)

    def unsubscribe(self, callback: Callable[..., Any] | None = None, payload: Any = None) -> bool:
        """Remove subscribers of ``callback``; every subscriber when omitted.

        Without ``payload`` all subscriptions of ``callback`` are removed,
        whatever payload they were registered with.
        """

        if not callback:
            return bool(self.unsubscribe_all())

        found = False
        for index in range(len(self.subscribers) - 1, -1, -1):
            if self.subscribers[index].matches(callback, payload):
                self._delete(index)
                found = True
        return found

    def unsubscribe_all(self) -> int:
        count = len(self.subscribers)
        for index in range(count - 1, -1, -1):
            self._delete(index)
        self.subscribers = []
        return count

    def fire(self, *args: Any) -> bool:
        """Notify every subscriber with ``args``.

        Returns ``False`` if a subscriber returned ``False``, ``True`` otherwise.
        """

        self.last_error = None
        fired_args = tuple(args)

        if self.fire_once:
            if self.fired:
                self.diagnostics(f"fireOnce event has already fired: {self.name}", "info", "Event")
                return True
            self.fired_with = fired_args

        self.fired = True

        if not self.subscribers and self.silent:
            return True

        # Subscribers may unsubscribe each other while being notified.
        snapshot = tuple(self.subscribers)
        total = len(snapshot)

        if not self.silent:
            self.diagnostics(
                f"Firing {self}, args: {list(fired_args)}, subscribers: {total}",
                "info",
                "Event",
            )

        result: Any = True
        for index, subscriber in enumerate(snapshot):
            if subscriber.detached:
                continue
            result = self.notify(subscriber, fired_args)
            if result is False:
                if not self.silent:
                    self.diagnostics(f"Event stopped, sub {index} of {total}", "info", "Event")
                break

        return result is not False

    def notify(self, subscriber: Subscriber, args: Sequence[Any]) -> Any:
        """Invoke a single subscriber and return its result.

        Returns ``None`` when the subscriber raised and the error was captured.
        """

        if not self.silent:
            self.diagnostics(f"{self.name}-> {subscriber}", "info", "Event")

        callback = subscriber.callback
        if callback is None:
            return None

        token = _CURRENT_CONTEXT.set(subscriber.resolve_context(self.context))
        try:
            if self.signature is Signature.FLAT:
                param = args[0] if len(args) > 0 else None
                return callback(param, subscriber.payload)
            return callback(self.name, list(args), subscriber.payload)
        except Exception as exc:
            error = SubscriberExecutionError(self.name, subscriber, exc)
            self.last_error = error
            self.diagnostics(f"{self} subscriber exception: {exc!r}", "error", "Event")
            if self.settings.throw_errors:
                raise error from exc
            return None
        finally:
            _CURRENT_CONTEXT.reset(token)

    def _delete(self, index: int) -> None:
        subscriber = self.subscribers.pop(index)
        subscriber.detach()

    def __str__(self) -> str:
        return f"CustomEvent: '{self.name}', context: {self.context}"

    def __repr__(self) -> str:
        return f"<{self}>"
