from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .builder import ErrorBuilder
from .deprecation import DeprecationHandler, get_deprecation_handler
from .errors import HttpError
from .registry import ErrorRegistry, default_registry
from .status_table import StatusTable, is_status_number


def is_http_error(value: object) -> bool:
    """Return ``True`` when ``value`` behaves like an HTTP error.

    Instances of :class:`HttpError` always qualify. Other exceptions qualify
    when they carry a boolean ``expose``, a numeric ``status_code`` and an
    equal ``status``.
    """

    if value is None:
        return False
    if isinstance(value, HttpError):
        return True
    if not isinstance(value, BaseException):
        return False
    status_code = getattr(value, "status_code", None)
    return (
        isinstance(getattr(value, "expose", None), bool)
        and is_status_number(status_code)
        and getattr(value, "status", None) == status_code
    )


class ErrorFactory:
    """Callable that turns loosely typed arguments into an HTTP error.

    Positional arguments are classified left to right: an exception is adopted
    as the base error, a string is the message, a number is the status and a
    mapping holds extra properties to copy onto the result. Anything else is
    ignored. See :class:`ErrorBuilder` for the resolution rules.

    Variant classes are reachable as ``factory[404]``, ``factory["NotFound"]``
    or ``factory.NotFound``.
    """

    HttpError = HttpError

    def __init__(
        self,
        registry: ErrorRegistry | None = None,
        deprecate: DeprecationHandler | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self._deprecate = deprecate

    @property
    def statuses(self) -> StatusTable:
        return self.registry.table

    @staticmethod
    def is_http_error(value: object) -> bool:
        return is_http_error(value)

    def builder(self) -> ErrorBuilder:
        deprecate = self._deprecate if self._deprecate is not None else get_deprecation_handler()
        return ErrorBuilder(self.registry, deprecate)

    def __call__(self, *args: Any) -> BaseException:
        builder = self.builder()
        for index, arg in enumerate(args):
            if isinstance(arg, BaseException):
                builder.with_cause(arg)
            elif isinstance(arg, str):
                builder.with_message(arg)
            elif is_status_number(arg):
                builder.with_status(arg, leading=index == 0)
            elif isinstance(arg, Mapping):
                builder.with_properties(arg)
        return builder.build()

    def __getitem__(self, key: int | str) -> type[HttpError]:
        return self.registry[key]

    def __contains__(self, key: object) -> bool:
        return key in self.registry

    def __getattr__(self, name: str) -> type[HttpError]:
        if name.startswith("_") or name == "registry":
            raise AttributeError(name)
        try:
            return self.registry[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None


create_error = ErrorFactory()


__all__ = ["ErrorFactory", "create_error", "is_http_error"]
