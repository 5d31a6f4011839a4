from __future__ import annotations

from typing import Any, ClassVar


class HttpErrorsError(Exception):
    """Base error for httperrors tooling."""


class UnknownVariantError(HttpErrorsError, KeyError):
    """Raised when no error variant is registered under a key."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No HTTP error variant registered for {self.key!r}"


class HttpErrorsDeprecationWarning(DeprecationWarning):
    """Category used when ``create_error`` is called in a deprecated way."""


class HttpError(Exception):
    """Abstract base of every HTTP error variant.

    Concrete variants are generated per status code by
    :func:`httperrors.registry.build_registry`; this class and the
    :class:`ClientError` / :class:`ServerError` bases cannot be instantiated.
    """

    _abstract: ClassVar[bool] = True

    status: int
    status_code: int
    expose: bool
    phrase: ClassVar[str] = ""

    def __new__(cls, *args: Any, **kwargs: Any) -> HttpError:
        if cls.__dict__.get("_abstract", False):
            raise TypeError("cannot construct abstract class")
        return super().__new__(cls, *args)

    def __init__(self, message: str | None = None) -> None:
        msg = message if message is not None else self.phrase
        super().__init__(msg)
        self.message = msg
        self.name = type(self).__name__

    def __str__(self) -> str:
        return str(self.message)


class ClientError(HttpError):
    """Base of the 4xx variants; messages are safe to expose."""

    _abstract: ClassVar[bool] = True
    expose = True


class ServerError(HttpError):
    """Base of the 5xx variants; messages stay internal."""

    _abstract: ClassVar[bool] = True
    expose = False


__all__ = [
    "ClientError",
    "HttpError",
    "HttpErrorsDeprecationWarning",
    "HttpErrorsError",
    "ServerError",
    "UnknownVariantError",
]
