from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s")
_NON_IDENTIFIER = re.compile(r"[^ _0-9A-Za-z]")


def to_identifier(phrase: str) -> str:
    """Turn a reason phrase into a class-name-like identifier.

    ``"Request Entity Too Large"`` becomes ``"RequestEntityTooLarge"`` and
    ``"I'm a teapot"`` becomes ``"ImATeapot"``.
    """

    tokens = _WHITESPACE.split(phrase)
    joined = "".join(token[:1].upper() + token[1:] for token in tokens)
    return _NON_IDENTIFIER.sub("", joined)


def to_class_name(identifier: str) -> str:
    return identifier if identifier[-5:] == "Error" else identifier + "Error"


def code_class(status: object) -> int | None:
    """Return the hundred-bucket of ``status`` (404 -> 400), ``None`` if it has none."""

    try:
        return int(str(status)[:1] + "00")
    except ValueError:
        return None


__all__ = ["code_class", "to_class_name", "to_identifier"]
