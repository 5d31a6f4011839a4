from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

NO_DEPRECATION_ENV = "NO_DEPRECATION"
TRACE_DEPRECATION_ENV = "TRACE_DEPRECATION"

_SEPARATORS = re.compile(r"[\s,]+")


def _matches(namespaces: tuple[str, ...], namespace: str) -> bool:
    wanted = namespace.lower()
    return any(entry == "*" or entry.lower() == wanted for entry in namespaces)


class DeprecationSettings(BaseModel):
    """Environment-driven switches for the deprecation channel.

    ``NO_DEPRECATION`` silences the listed namespaces and ``TRACE_DEPRECATION``
    attaches the caller's stack to the logged message. Both accept a comma or
    whitespace separated list, with ``*`` matching every namespace.
    """

    no_deprecation: tuple[str, ...] = ()
    trace_deprecation: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("no_deprecation", "trace_deprecation", mode="before")
    @classmethod
    def _split_namespaces(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(part for part in _SEPARATORS.split(value) if part)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DeprecationSettings:
        env = os.environ if environ is None else environ
        return cls(
            no_deprecation=env.get(NO_DEPRECATION_ENV),
            trace_deprecation=env.get(TRACE_DEPRECATION_ENV),
        )

    def is_silenced(self, namespace: str) -> bool:
        return _matches(self.no_deprecation, namespace)

    def is_traced(self, namespace: str) -> bool:
        return _matches(self.trace_deprecation, namespace)


__all__ = ["DeprecationSettings", "NO_DEPRECATION_ENV", "TRACE_DEPRECATION_ENV"]
