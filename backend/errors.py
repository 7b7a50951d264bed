"""Typed failures raised by ledger repositories."""

from __future__ import annotations


class TransactionNotFoundError(LookupError):
    """Raised when no live transaction carries the requested id."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id


class MethodNotFoundError(ValueError):
    """Raised when a method code is absent from the method directory."""

    def __init__(self, method_code: int) -> None:
        super().__init__(f"Unknown method code: {method_code}")
        self.method_code = method_code


class InvariantViolationError(RuntimeError):
    """Raised when the store detects a broken internal invariant."""
