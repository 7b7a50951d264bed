"""Utilities for method code handling in repositories."""

from __future__ import annotations

from backend.repositories.methods_repository import MethodsRepository
from shared.models import INCOMING_METHOD_CODE, OUTGOING_METHOD_CODE


def default_method_code(amount: int) -> int:
    """Return the generic direction code implied by the amount's sign."""
    return INCOMING_METHOD_CODE if amount >= 0 else OUTGOING_METHOD_CODE


def normalize_method_code(
    method_code: int | None,
    *,
    amount: int,
    methods: MethodsRepository,
) -> int:
    """Resolve a stored method code; raises ``MethodNotFoundError`` for unknown codes."""
    if method_code is None:
        return default_method_code(amount)
    methods.resolve(method_code)
    return method_code
