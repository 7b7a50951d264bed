"""Transactions repository adapters.

The in-memory repository is the single owner of the ledger's transaction
collection. Records are kept in an insertion-ordered mapping keyed by id, so
listing preserves creation order while lookups, updates and deletes stay
constant time.
"""

from __future__ import annotations

import logging
from itertools import count
from threading import RLock
from typing import Protocol

from backend.errors import InvariantViolationError, TransactionNotFoundError
from backend.repositories.method_utils import normalize_method_code
from backend.repositories.methods_repository import MethodsRepository
from shared.models import (
    MethodMapping,
    Transaction,
    TransactionCreateRequest,
    TransactionUpdateRequest,
)


logger = logging.getLogger(__name__)


class TransactionsRepository(Protocol):
    def list_transactions(self) -> list[Transaction]:
        """Return every live transaction in insertion order."""

    def list_transactions_by_method(self, method_code: int) -> list[Transaction]:
        """Return live transactions carrying the method code, in insertion order."""

    def balance(self) -> tuple[int, int]:
        """Return the summed amount and count of live transactions."""

    def method_map(self) -> list[MethodMapping]:
        """Return the method directory mappings."""

    def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        """Create and return a transaction with a fresh id."""

    def update_transaction(self, request: TransactionUpdateRequest) -> Transaction:
        """Apply the supplied fields and return the updated transaction."""

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a live transaction."""


class InMemoryTransactionsRepository:
    """Process-lifetime ledger store guarded by a single lock."""

    def __init__(self, methods: MethodsRepository) -> None:
        self._methods = methods
        self._transactions: dict[int, Transaction] = {}
        self._ids = count()
        self._lock = RLock()

    def list_transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self._transactions.values())

    def list_transactions_by_method(self, method_code: int) -> list[Transaction]:
        with self._lock:
            return [
                transaction
                for transaction in self._transactions.values()
                if transaction.method_code == method_code
            ]

    def balance(self) -> tuple[int, int]:
        with self._lock:
            total = sum(transaction.amount for transaction in self._transactions.values())
            return total, len(self._transactions)

    def method_map(self) -> list[MethodMapping]:
        return self._methods.list_methods()

    def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        method_code = normalize_method_code(
            request.method_code,
            amount=request.amount,
            methods=self._methods,
        )
        with self._lock:
            transaction_id = next(self._ids)
            if transaction_id in self._transactions:
                logger.critical("transaction_id_collision id=%s", transaction_id)
                raise InvariantViolationError(f"Duplicate transaction id: {transaction_id}")

            transaction = Transaction(
                id=transaction_id,
                date=request.date,
                amount=request.amount,
                status=request.status,
                counterparty_name=request.counterparty_name,
                method_code=method_code,
                note=request.note,
            )
            self._transactions[transaction_id] = transaction

        logger.info(
            "transaction_created id=%s amount=%s method_code=%s",
            transaction.id,
            transaction.amount,
            transaction.method_code,
        )
        return transaction

    def update_transaction(self, request: TransactionUpdateRequest) -> Transaction:
        changes = request.changes()
        with self._lock:
            current = self._transactions.get(request.transaction_id)
            if current is None:
                raise TransactionNotFoundError(request.transaction_id)

            if "method_code" in changes:
                changes["method_code"] = normalize_method_code(
                    changes["method_code"],
                    amount=changes.get("amount", current.amount),
                    methods=self._methods,
                )

            # validated before it replaces the stored record
            updated = Transaction.model_validate({**current.model_dump(), **changes})
            self._transactions[current.id] = updated

        logger.info(
            "transaction_updated id=%s fields=%s",
            updated.id,
            ",".join(sorted(changes)),
        )
        return updated

    def delete_transaction(self, transaction_id: int) -> None:
        with self._lock:
            if self._transactions.pop(transaction_id, None) is None:
                raise TransactionNotFoundError(transaction_id)

        logger.info("transaction_deleted id=%s", transaction_id)
