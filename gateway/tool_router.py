"""Tool router mapping named ledger operations to backend client methods."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from difflib import get_close_matches

from pydantic import BaseModel, ValidationError

from gateway.backend_client import BackendClient
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


_PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "ledger_transactions_by_method": TransactionsByMethodRequest,
    "ledger_transactions_create": TransactionCreateRequest,
    "ledger_transactions_update": TransactionUpdateRequest,
    "ledger_transactions_delete": TransactionDeleteRequest,
}
_NO_PAYLOAD_TOOLS = frozenset(
    {
        "ledger_transactions_list",
        "ledger_balance_get",
        "ledger_method_map",
    }
)
TOOL_NAMES = frozenset(_PAYLOAD_MODELS) | _NO_PAYLOAD_TOOLS


@dataclass(slots=True)
class ToolRouter:
    backend_client: BackendClient

    def call(
        self,
        tool_name: str,
        payload: dict | None = None,
    ) -> (
        TransactionsListResult
        | BalanceResult
        | MethodMapResult
        | Transaction
        | dict[str, object]
        | ToolError
    ):
        payload = payload or {}

        if tool_name not in TOOL_NAMES:
            return ToolError(
                code=ToolErrorCode.UNKNOWN_TOOL,
                message=f"Unknown tool: {tool_name}",
                details={"close_tool_names": get_close_matches(tool_name, sorted(TOOL_NAMES), n=3)},
            )

        if tool_name in _NO_PAYLOAD_TOOLS:
            if payload:
                return ToolError(
                    code=ToolErrorCode.VALIDATION_ERROR,
                    message=f"Tool {tool_name} takes no payload",
                    details={"payload": payload},
                )
            method = getattr(self.backend_client, tool_name)
            return method()

        try:
            request = _PAYLOAD_MODELS[tool_name].model_validate(payload)
        except ValidationError as exc:
            logger.info("tool_payload_rejected tool=%s error_count=%s", tool_name, exc.error_count())
            return ToolError(
                code=ToolErrorCode.VALIDATION_ERROR,
                message=f"Invalid payload for tool {tool_name}",
                details={
                    "validation_errors": exc.errors(include_url=False, include_context=False),
                    "payload": payload,
                },
            )

        method = getattr(self.backend_client, tool_name)
        return method(request)
