"""Contract tests for named ledger operations dispatched by the tool router."""

from __future__ import annotations

from backend.factory import build_backend_tool_service
from gateway.backend_client import BackendClient
from gateway.tool_router import ToolRouter
from shared.models import (
    BalanceResult,
    ToolError,
    ToolErrorCode,
    Transaction,
    TransactionsListResult,
)


def _router(*, seed: bool = False) -> ToolRouter:
    return ToolRouter(backend_client=BackendClient(tool_service=build_backend_tool_service(seed=seed)))


def _create_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": "2024-03-01T12:00:00Z",
        "amount": 2500,
        "status": "Pending",
        "counterpartyName": "Employer",
    }
    payload.update(overrides)
    return payload


def test_create_then_list_round_trip() -> None:
    router = _router()

    created = router.call("ledger_transactions_create", _create_payload(note="salary"))
    listed = router.call("ledger_transactions_list", {})

    assert isinstance(created, Transaction)
    assert created.method_code == -1
    assert isinstance(listed, TransactionsListResult)
    assert listed.items == [created]


def test_unknown_status_is_rejected_before_reaching_store() -> None:
    router = _router()

    result = router.call("ledger_transactions_create", _create_payload(status="Settled"))

    assert isinstance(result, ToolError)
    assert result.code == ToolErrorCode.VALIDATION_ERROR
    assert result.details is not None
    assert result.details["validation_errors"]
    assert router.call("ledger_balance_get") == BalanceResult(balance=0, count=0)


def test_update_partial_fields_by_id() -> None:
    router = _router(seed=True)

    result = router.call("ledger_transactions_update", {"id": 1, "note": "reviewed", "status": "Posted"})

    assert isinstance(result, Transaction)
    assert result.id == 1
    assert result.note == "reviewed"
    assert result.status.value == "Posted"
    assert result.amount == -1


def test_update_rejects_changing_id_field_alias() -> None:
    router = _router(seed=True)

    result = router.call("ledger_transactions_update", {"id": 1, "ID": 9})

    assert isinstance(result, ToolError)
    assert result.code == ToolErrorCode.VALIDATION_ERROR


def test_delete_then_update_reports_not_found() -> None:
    router = _router(seed=True)

    deleted = router.call("ledger_transactions_delete", {"id": 3})
    updated = router.call("ledger_transactions_update", {"id": 3, "note": "late"})

    assert deleted == {"ok": True, "id": 3}
    assert isinstance(updated, ToolError)
    assert updated.code == ToolErrorCode.NOT_FOUND


def test_by_method_requires_integer_code() -> None:
    router = _router(seed=True)

    ok = router.call("ledger_transactions_by_method", {"methodCode": -2})
    bad = router.call("ledger_transactions_by_method", {"methodCode": "outgoing"})

    assert isinstance(ok, TransactionsListResult)
    assert [item.id for item in ok.items] == [1, 3]
    assert isinstance(bad, ToolError)
    assert bad.code == ToolErrorCode.VALIDATION_ERROR


def test_no_payload_tools_reject_arguments() -> None:
    result = _router().call("ledger_balance_get", {"unexpected": True})

    assert isinstance(result, ToolError)
    assert result.code == ToolErrorCode.VALIDATION_ERROR


def test_unknown_tool_suggests_close_names() -> None:
    result = _router().call("ledger_balance", {})

    assert isinstance(result, ToolError)
    assert result.code == ToolErrorCode.UNKNOWN_TOOL
    assert result.details is not None
    assert "ledger_balance_get" in result.details["close_tool_names"]


def test_out_of_range_epoch_date_is_a_validation_error() -> None:
    router = _router(seed=True)

    created = router.call("ledger_transactions_create", _create_payload(date=10**20))
    updated = router.call("ledger_transactions_update", {"id": 0, "date": 10**20})

    assert isinstance(created, ToolError)
    assert created.code == ToolErrorCode.VALIDATION_ERROR
    assert isinstance(updated, ToolError)
    assert updated.code == ToolErrorCode.VALIDATION_ERROR
    assert router.call("ledger_balance_get") == BalanceResult(balance=0, count=4)


def test_negative_id_reports_not_found() -> None:
    router = _router(seed=True)

    updated = router.call("ledger_transactions_update", {"id": -1, "note": "x"})
    deleted = router.call("ledger_transactions_delete", {"id": -1})

    assert isinstance(updated, ToolError)
    assert updated.code == ToolErrorCode.NOT_FOUND
    assert isinstance(deleted, ToolError)
    assert deleted.code == ToolErrorCode.NOT_FOUND
