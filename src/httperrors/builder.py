from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .deprecation import DeprecationHandler, get_deprecation_handler
from .registry import ErrorRegistry, default_registry
from .status_table import is_status_number

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
PROTECTED_PROPERTIES = frozenset({"status", "status_code", "statusCode"})


def _assign(error: BaseException, name: str, value: Any) -> None:
    """Set an attribute on ``error``, logging and skipping read-only ones."""

    try:
        setattr(error, name, value)
    except (AttributeError, TypeError) as exc:
        logger.warning("Cannot copy property %r onto %s: %s", name, type(error).__name__, exc)


class ErrorBuilder:
    """Collect the parts of an HTTP error and resolve them into one exception.

    Every ``with_*`` call replaces the previous value of its kind, so the last
    status, message, cause and properties bag win; bags are never merged.

    A status is expected to be the leading input. Supplying it after any other
    input (or passing ``leading=False``) still applies it but emits a
    deprecation signal through the configured handler.
    """

    def __init__(
        self,
        registry: ErrorRegistry | None = None,
        deprecate: DeprecationHandler | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._deprecate = deprecate if deprecate is not None else get_deprecation_handler()
        self._inputs = 0
        self._status: Any = DEFAULT_STATUS
        self._message: str | None = None
        self._cause: BaseException | None = None
        self._properties: Mapping[Any, Any] = {}

    def with_status(self, status: Any, *, leading: bool | None = None) -> ErrorBuilder:
        if leading is None:
            leading = self._inputs == 0
        self._inputs += 1
        self._status = status
        if not leading:
            self._deprecate(
                f"non-first-argument status code; replace with create_error({status}, ...)"
            )
        return self

    def with_message(self, message: str) -> ErrorBuilder:
        self._inputs += 1
        self._message = message
        return self

    def with_cause(self, error: BaseException) -> ErrorBuilder:
        """Adopt ``error`` as the base exception, taking over its status if it has one."""

        self._inputs += 1
        self._cause = error
        self._status = (
            getattr(error, "status", None) or getattr(error, "status_code", None) or self._status
        )
        return self

    def with_properties(self, properties: Mapping[Any, Any]) -> ErrorBuilder:
        self._inputs += 1
        self._properties = properties
        return self

    def build(self) -> BaseException:
        table = self._registry.table
        status = self._status
        numeric = is_status_number(status)

        if numeric and (status < 400 or status >= 600):
            self._deprecate("non-error status code; use only 4xx or 5xx status codes")

        if not numeric or (table.message(status) is None and (status < 400 or status >= 600)):
            status = DEFAULT_STATUS

        variant = self._registry.match(status)

        error = self._cause
        if error is None:
            if variant is not None:
                error = variant(self._message)
            else:
                error = Exception(self._message or table.message(status) or "")

        if (
            variant is None
            or not isinstance(error, variant)
            or getattr(error, "status", None) != status
        ):
            _assign(error, "expose", status < 500)
            _assign(error, "status", status)
            _assign(error, "status_code", status)

        for key, value in self._properties.items():
            if key in PROTECTED_PROPERTIES:
                continue
            _assign(error, str(key), value)
        return error


__all__ = ["DEFAULT_STATUS", "ErrorBuilder", "PROTECTED_PROPERTIES"]
