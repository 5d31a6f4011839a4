"""Create HTTP errors keyed by standard status codes.

>>> from httperrors import create_error
>>> err = create_error(404, "no such user")
>>> err.status, err.expose, err.name
(404, True, 'NotFoundError')

Per-status classes are generated at import time and exposed both by
identifier and by class name (``httperrors.NotFound`` and
``httperrors.NotFoundError``).
"""

from __future__ import annotations

from .builder import ErrorBuilder
from .config import DeprecationSettings
from .deprecation import (
    RecordingReporter,
    WarningsReporter,
    deprecation_handler,
    get_deprecation_handler,
    set_deprecation_handler,
)
from .errors import (
    ClientError,
    HttpError,
    HttpErrorsDeprecationWarning,
    HttpErrorsError,
    ServerError,
    UnknownVariantError,
)
from .factory import ErrorFactory, create_error, is_http_error
from .registry import ErrorRegistry, VariantDescriptor, build_registry, default_registry
from .status_table import StatusTable, statuses


def __getattr__(name: str) -> type[HttpError]:
    try:
        return default_registry[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(default_registry.names()) | set(default_registry.aliases()))


__all__ = [
    "ClientError",
    "DeprecationSettings",
    "ErrorBuilder",
    "ErrorFactory",
    "ErrorRegistry",
    "HttpError",
    "HttpErrorsDeprecationWarning",
    "HttpErrorsError",
    "RecordingReporter",
    "ServerError",
    "StatusTable",
    "UnknownVariantError",
    "VariantDescriptor",
    "WarningsReporter",
    "build_registry",
    "create_error",
    "default_registry",
    "deprecation_handler",
    "get_deprecation_handler",
    "is_http_error",
    "set_deprecation_handler",
    "statuses",
]
