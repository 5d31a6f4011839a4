"""Pluggable channel for deprecated-usage signals."""

from __future__ import annotations

import inspect
import logging
import os
import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from .config import DeprecationSettings
from .errors import HttpErrorsDeprecationWarning

logger = logging.getLogger(__name__)

NAMESPACE = "httperrors"

DeprecationHandler = Callable[[str], None]

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def _caller_stacklevel() -> int:
    """Return the ``warnings.warn`` stacklevel of the first frame outside this package.

    Levels are counted from the frame that calls this helper.
    """

    current = inspect.currentframe()
    frame = current.f_back if current is not None else None
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


class WarningsReporter:
    """Default handler: log the signal and issue a deprecation warning.

    ``stacklevel`` is counted from :meth:`__call__`. When it is ``None`` the
    warning points at the first caller outside httperrors, whether that code
    called ``create_error`` or drove an ``ErrorBuilder`` directly.
    """

    def __init__(
        self,
        namespace: str = NAMESPACE,
        settings_loader: Callable[[], DeprecationSettings] = DeprecationSettings.from_env,
        stacklevel: int | None = None,
    ) -> None:
        self.namespace = namespace
        self._settings_loader = settings_loader
        self._stacklevel = stacklevel

    def __call__(self, message: str) -> None:
        settings = self._settings_loader()
        if settings.is_silenced(self.namespace):
            return
        logger.warning(
            "%s deprecated %s",
            self.namespace,
            message,
            stack_info=settings.is_traced(self.namespace),
        )
        stacklevel = self._stacklevel if self._stacklevel is not None else _caller_stacklevel()
        warnings.warn(message, HttpErrorsDeprecationWarning, stacklevel=stacklevel)


@dataclass
class RecordingReporter:
    """Handler that only collects messages, for tests and diagnostics."""

    messages: list[str] = field(default_factory=list)

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


_handler: DeprecationHandler = WarningsReporter()


def get_deprecation_handler() -> DeprecationHandler:
    return _handler


def set_deprecation_handler(handler: DeprecationHandler | None) -> DeprecationHandler:
    """Install ``handler`` process-wide and return the previous one.

    Passing ``None`` restores a fresh :class:`WarningsReporter`.
    """

    global _handler

    previous = _handler
    _handler = handler if handler is not None else WarningsReporter()
    return previous


@contextmanager
def deprecation_handler(handler: DeprecationHandler) -> Iterator[DeprecationHandler]:
    previous = set_deprecation_handler(handler)
    try:
        yield handler
    finally:
        set_deprecation_handler(previous)


__all__ = [
    "DeprecationHandler",
    "NAMESPACE",
    "RecordingReporter",
    "WarningsReporter",
    "deprecation_handler",
    "get_deprecation_handler",
    "set_deprecation_handler",
]
