"""Backend tool service for ledger operations.

Every method returns either a typed result or a ``ToolError``; repository
exceptions never cross this boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from backend.errors import InvariantViolationError, MethodNotFoundError, TransactionNotFoundError
from backend.repositories.transactions_repository import TransactionsRepository
from shared.models import (
    BalanceResult,
    MethodMapResult,
    ToolError,
    ToolErrorCode,
    Transaction,
    TransactionCreateRequest,
    TransactionDeleteRequest,
    TransactionsByMethodRequest,
    TransactionsListResult,
    TransactionUpdateRequest,
)


logger = logging.getLogger(__name__)


def _to_tool_error(exc: Exception) -> ToolError:
    """Map a repository failure to its stable tool error."""

    if isinstance(exc, TransactionNotFoundError):
        return ToolError(
            code=ToolErrorCode.NOT_FOUND,
            message=str(exc),
            details={"id": exc.transaction_id},
        )
    if isinstance(exc, MethodNotFoundError):
        return ToolError(
            code=ToolErrorCode.VALIDATION_ERROR,
            message=str(exc),
            details={"method_code": exc.method_code},
        )
    if isinstance(exc, ValidationError):
        return ToolError(
            code=ToolErrorCode.VALIDATION_ERROR,
            message="Invalid transaction fields",
            details={"validation_errors": exc.errors(include_url=False, include_context=False)},
        )
    if isinstance(exc, InvariantViolationError):
        return ToolError(code=ToolErrorCode.INVARIANT_VIOLATION, message=str(exc))
    logger.exception("ledger_backend_error")
    return ToolError(code=ToolErrorCode.BACKEND_ERROR, message=str(exc))


@dataclass(slots=True)
class BackendToolService:
    transactions_repository: TransactionsRepository

    def ledger_transactions_list(self) -> TransactionsListResult | ToolError:
        try:
            items = self.transactions_repository.list_transactions()
            return TransactionsListResult(items=items, count=len(items))
        except Exception as exc:  # normalization at contract boundary
            return _to_tool_error(exc)

    def ledger_transactions_by_method(
        self, request: TransactionsByMethodRequest
    ) -> TransactionsListResult | ToolError:
        try:
            items = self.transactions_repository.list_transactions_by_method(
                request.method_code
            )
            return TransactionsListResult(items=items, count=len(items))
        except Exception as exc:  # normalization at contract boundary
            return _to_tool_error(exc)

    def ledger_balance_get(self) -> BalanceResult | ToolError:
        try:
            total, count = self.transactions_repository.balance()
            return BalanceResult(balance=total, count=count)
        except Exception as exc:  # normalization at contract boundary
            return _to_tool_error(exc)

    def ledger_method_map(self) -> MethodMapResult | ToolError:
        try:
            return MethodMapResult(items=self.transactions_repository.method_map())
        except Exception as exc:  # normalization at contract boundary
            return _to_tool_error(exc)

    def ledger_transactions_create(
        self, request: TransactionCreateRequest
    ) -> Transaction | ToolError:
        try:
            return self.transactions_repository.create_transaction(request)
        except Exception as exc:
            return _to_tool_error(exc)

    def ledger_transactions_update(
        self, request: TransactionUpdateRequest
    ) -> Transaction | ToolError:
        try:
            return self.transactions_repository.update_transaction(request)
        except Exception as exc:
            return _to_tool_error(exc)

    def ledger_transactions_delete(
        self, request: TransactionDeleteRequest
    ) -> dict[str, object] | ToolError:
        try:
            self.transactions_repository.delete_transaction(request.transaction_id)
            return {"ok": True, "id": request.transaction_id}
        except Exception as exc:
            return _to_tool_error(exc)
