"""Backend client abstraction for the gateway (in-process by default)."""

from __future__ import annotations

from dataclasses import dataclass

from backend.services.tools import BackendToolService
from shared.models import (
    BalanceResult,
    MethodMapResult,
    ToolError,
    Transaction,
    TransactionCreateRequest,
    TransactionDeleteRequest,
    TransactionsByMethodRequest,
    TransactionsListResult,
    TransactionUpdateRequest,
)


@dataclass(slots=True)
class BackendClient:
    tool_service: BackendToolService

    def ledger_transactions_list(self) -> TransactionsListResult | ToolError:
        return self.tool_service.ledger_transactions_list()

    def ledger_transactions_by_method(
        self, request: TransactionsByMethodRequest
    ) -> TransactionsListResult | ToolError:
        return self.tool_service.ledger_transactions_by_method(request)

    def ledger_balance_get(self) -> BalanceResult | ToolError:
        return self.tool_service.ledger_balance_get()

    def ledger_method_map(self) -> MethodMapResult | ToolError:
        return self.tool_service.ledger_method_map()

    def ledger_transactions_create(
        self, request: TransactionCreateRequest
    ) -> Transaction | ToolError:
        return self.tool_service.ledger_transactions_create(request)

    def ledger_transactions_update(
        self, request: TransactionUpdateRequest
    ) -> Transaction | ToolError:
        return self.tool_service.ledger_transactions_update(request)

    def ledger_transactions_delete(
        self, request: TransactionDeleteRequest
    ) -> dict[str, object] | ToolError:
        return self.tool_service.ledger_transactions_delete(request)
