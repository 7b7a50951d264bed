"""Validation tests for ledger wire contracts."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from shared.models import (
    Transaction,
    TransactionCreateRequest,
    TransactionStatus,
    TransactionUpdateRequest,
)


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": "2023-09-24T23:29:56.901Z",
        "amount": 150,
        "status": "Posted",
        "counterpartyName": "Acme",
    }
    payload.update(overrides)
    return payload


def test_create_request_accepts_camel_case_payload() -> None:
    request = TransactionCreateRequest.model_validate(_payload(methodCode=12, note="rent"))

    assert request.counterparty_name == "Acme"
    assert request.method_code == 12
    assert request.status is TransactionStatus.POSTED
    assert request.date == datetime(2023, 9, 24, 23, 29, 56, 901000, tzinfo=timezone.utc)


@pytest.mark.parametrize("millis", [10**15, 10**20, -(10**20)])
def test_create_request_rejects_out_of_range_epoch_milliseconds(millis: int) -> None:
    with pytest.raises(ValidationError, match="timestamp out of range"):
        TransactionCreateRequest.model_validate(_payload(date=millis))


def test_create_request_accepts_epoch_milliseconds() -> None:
    request = TransactionCreateRequest.model_validate(_payload(date=1695598196901))

    assert request.date == datetime(2023, 9, 24, 23, 29, 56, 901000, tzinfo=timezone.utc)


@pytest.mark.parametrize("status", ["pending", "POSTED", "Cleared", "", 1])
def test_create_request_rejects_unknown_status(status: object) -> None:
    with pytest.raises(ValidationError):
        TransactionCreateRequest.model_validate(_payload(status=status))


@pytest.mark.parametrize("name", ["", "   "])
def test_create_request_rejects_blank_counterparty(name: str) -> None:
    with pytest.raises(ValidationError):
        TransactionCreateRequest.model_validate(_payload(counterpartyName=name))


def test_create_request_requires_counterparty() -> None:
    payload = _payload()
    del payload["counterpartyName"]

    with pytest.raises(ValidationError):
        TransactionCreateRequest.model_validate(payload)


@pytest.mark.parametrize("amount", ["150", 1.5, True])
def test_create_request_rejects_non_integer_amount(amount: object) -> None:
    with pytest.raises(ValidationError):
        TransactionCreateRequest.model_validate(_payload(amount=amount))


def test_update_request_tracks_supplied_fields_only() -> None:
    request = TransactionUpdateRequest.model_validate({"id": 3, "note": None, "amount": -20})

    assert request.transaction_id == 3
    assert request.changes() == {"note": None, "amount": -20}


@pytest.mark.parametrize("field", ["date", "amount", "status", "counterpartyName"])
def test_update_request_rejects_clearing_required_fields(field: str) -> None:
    with pytest.raises(ValidationError):
        TransactionUpdateRequest.model_validate({"id": 1, field: None})


def test_update_request_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        TransactionUpdateRequest.model_validate({"id": 1, "balance": 10})


def test_transaction_json_uses_aliases_and_epoch_milliseconds() -> None:
    transaction = Transaction(
        id=0,
        date=datetime(2023, 9, 24, 23, 29, 56, 901000, tzinfo=timezone.utc),
        amount=1,
        status=TransactionStatus.PENDING,
        counterparty_name="Test01",
        method_code=-1,
    )

    dumped = transaction.model_dump(mode="json", by_alias=True)

    assert dumped == {
        "id": 0,
        "date": 1695598196901,
        "amount": 1,
        "status": "Pending",
        "counterpartyName": "Test01",
        "methodCode": -1,
        "note": None,
    }
