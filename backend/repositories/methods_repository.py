"""Method directory mapping method codes to display names."""

from __future__ import annotations

from typing import Protocol

from backend.errors import MethodNotFoundError
from shared.models import INCOMING_METHOD_CODE, OUTGOING_METHOD_CODE, MethodMapping


DEFAULT_METHOD_MAPPINGS: tuple[MethodMapping, ...] = (
    MethodMapping(code=12, name="Card Purchase"),
    MethodMapping(code=34, name="ACH"),
    MethodMapping(code=56, name="Wire"),
    MethodMapping(code=78, name="Fee"),
    MethodMapping(code=INCOMING_METHOD_CODE, name="Incoming"),
    MethodMapping(code=OUTGOING_METHOD_CODE, name="Outgoing"),
)


class MethodsRepository(Protocol):
    def resolve(self, code: int) -> str:
        """Return the method name for a code or raise ``MethodNotFoundError``."""

    def list_methods(self) -> list[MethodMapping]:
        """Return every mapping in seed order."""


class InMemoryMethodsRepository:
    """Read-only method directory seeded once at startup."""

    def __init__(self, mappings: tuple[MethodMapping, ...] = DEFAULT_METHOD_MAPPINGS) -> None:
        self._mappings: dict[int, MethodMapping] = {}
        for mapping in mappings:
            if mapping.code in self._mappings:
                raise ValueError(f"Duplicate method code: {mapping.code}")
            self._mappings[mapping.code] = mapping

    def resolve(self, code: int) -> str:
        mapping = self._mappings.get(code)
        if mapping is None:
            raise MethodNotFoundError(code)
        return mapping.name

    def list_methods(self) -> list[MethodMapping]:
        return list(self._mappings.values())
