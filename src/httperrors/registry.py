from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict

from .errors import ClientError, HttpError, ServerError, UnknownVariantError
from .naming import code_class, to_class_name, to_identifier
from .status_table import StatusTable, is_status_number, statuses

logger = logging.getLogger(__name__)

_VARIANT_BASES: dict[int, type[HttpError]] = {400: ClientError, 500: ServerError}


class VariantDescriptor(BaseModel):
    """Static description of one per-status error variant."""

    status: int
    phrase: str
    identifier: str
    class_name: str
    expose: bool
    code_class: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_status(cls, status: int, phrase: str) -> VariantDescriptor | None:
        bucket = code_class(status)
        if bucket not in _VARIANT_BASES:
            return None
        identifier = to_identifier(phrase)
        return cls(
            status=status,
            phrase=phrase,
            identifier=identifier,
            class_name=to_class_name(identifier),
            expose=bucket == 400,
            code_class=bucket,
        )


def create_variant(descriptor: VariantDescriptor) -> type[HttpError]:
    """Create the error class bound to ``descriptor``'s status and expose policy."""

    base = _VARIANT_BASES[descriptor.code_class]
    namespace = {
        "__module__": "httperrors",
        "__qualname__": descriptor.class_name,
        "__doc__": f"HTTP {descriptor.status} {descriptor.phrase}.",
        "status": descriptor.status,
        "status_code": descriptor.status,
        "expose": descriptor.expose,
        "phrase": descriptor.phrase,
        "identifier": descriptor.identifier,
        "descriptor": descriptor,
    }
    return type(descriptor.class_name, (base,), namespace)


class ErrorRegistry(Mapping[int | str, type[HttpError]]):
    """Read-only lookup of variant classes by status code or identifier.

    ``registry[404]``, ``registry["NotFound"]`` and ``registry["NotFoundError"]``
    all resolve to the same class. Iteration yields codes, then identifiers,
    then the class names that differ from their identifier.
    """

    def __init__(self, variants: Iterable[type[HttpError]], table: StatusTable) -> None:
        self.table = table
        self._by_code: dict[int, type[HttpError]] = {}
        self._by_name: dict[str, type[HttpError]] = {}
        by_class_name: dict[str, type[HttpError]] = {}
        for variant in variants:
            descriptor: VariantDescriptor = variant.descriptor  # type: ignore[attr-defined]
            self._by_code[descriptor.status] = variant
            self._by_name[descriptor.identifier] = variant
            by_class_name[descriptor.class_name] = variant
        self._aliases = {
            name: variant for name, variant in by_class_name.items() if name not in self._by_name
        }

    def __getitem__(self, key: int | str) -> type[HttpError]:
        if isinstance(key, str):
            variant = self._by_name.get(key) or self._aliases.get(key)
        elif is_status_number(key):
            variant = self._by_code.get(key)
        else:
            variant = None
        if variant is None:
            raise UnknownVariantError(key)
        return variant

    def __iter__(self) -> Iterator[int | str]:
        yield from sorted(self._by_code)
        yield from self._by_name
        yield from self._aliases

    def __len__(self) -> int:
        return len(self._by_code) + len(self._by_name) + len(self._aliases)

    def match(self, status: object) -> type[HttpError] | None:
        """Return the variant for ``status`` or, failing that, for its status class."""

        variant = self.get(status)  # type: ignore[arg-type]
        if variant is None:
            variant = self.get(code_class(status))  # type: ignore[arg-type]
        return variant

    def descriptor(self, key: int | str) -> VariantDescriptor:
        return self[key].descriptor  # type: ignore[attr-defined]

    def variants(self) -> list[type[HttpError]]:
        return [self._by_code[code] for code in sorted(self._by_code)]

    def codes(self) -> list[int]:
        return sorted(self._by_code)

    def names(self) -> list[str]:
        return list(self._by_name)

    def aliases(self) -> list[str]:
        return list(self._aliases)


def build_registry(table: StatusTable = statuses) -> ErrorRegistry:
    """Generate one variant per 4xx/5xx code of ``table``."""

    variants = []
    for status in table:
        descriptor = VariantDescriptor.for_status(status, table[status])
        if descriptor is None:
            continue
        variants.append(create_variant(descriptor))
    logger.debug("Registered %d HTTP error variants", len(variants))
    return ErrorRegistry(variants, table)


default_registry = build_registry()


__all__ = [
    "ErrorRegistry",
    "VariantDescriptor",
    "build_registry",
    "create_variant",
    "default_registry",
]
