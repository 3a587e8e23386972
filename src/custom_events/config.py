"""Configuration models for custom events."""
from __future__ import annotations

import os
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

THROW_ERRORS_ENV = "CUSTOM_EVENTS_THROW_ERRORS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class EventSettings(BaseModel):
    """Settings shared by an event and the events it creates internally."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    throw_errors: bool = Field(
        default=False,
        description="If True subscriber exceptions are re-raised to the caller of fire().",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EventSettings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        raw: Dict[str, Any] = {}

        throw = env.get(THROW_ERRORS_ENV)
        if throw is not None:
            flag = throw.strip().lower()
            if flag in _TRUTHY:
                raw["throw_errors"] = True
            elif flag in _FALSY:
                raw["throw_errors"] = False
            else:
                raise ConfigurationError(f"Invalid boolean for {THROW_ERRORS_ENV}: {throw!r}")

        return build_settings_from_dict(raw)


def build_settings_from_dict(raw: Mapping[str, Any]) -> EventSettings:
    """Utility helper to build :class:`EventSettings` from a plain dictionary."""

    try:
        return EventSettings.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "EventSettings",
    "THROW_ERRORS_ENV",
    "build_settings_from_dict",
]
