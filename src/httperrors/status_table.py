"""HTTP status code table backed by :class:`httpx.codes`."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from numbers import Real

import httpx


def is_status_number(value: object) -> bool:
    """Return ``True`` for ints and floats, excluding booleans."""

    return isinstance(value, Real) and not isinstance(value, bool)


class StatusTable:
    """Read-only mapping of status codes to their canonical reason phrases."""

    def __init__(self, messages: Mapping[int, str] | None = None) -> None:
        if messages is None:
            messages = {int(code): code.phrase for code in httpx.codes}
        self._messages: dict[int, str] = dict(messages)
        self._codes_by_phrase = {phrase.lower(): code for code, phrase in self._messages.items()}
        self.codes: frozenset[int] = frozenset(self._messages)

    def message(self, code: object) -> str | None:
        """Return the reason phrase for ``code`` or ``None`` when unknown."""

        if not is_status_number(code):
            return None
        return self._messages.get(code)  # type: ignore[call-overload]

    def code_for(self, phrase: str) -> int | None:
        """Reverse lookup of a reason phrase, ignoring case."""

        return self._codes_by_phrase.get(phrase.strip().lower())

    def __getitem__(self, code: int) -> str:
        message = self.message(code)
        if message is None:
            raise KeyError(code)
        return message

    def __contains__(self, code: object) -> bool:
        return self.message(code) is not None

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._messages))

    def __len__(self) -> int:
        return len(self._messages)


statuses = StatusTable()


__all__ = ["StatusTable", "is_status_number", "statuses"]
