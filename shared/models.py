"""Pydantic contracts shared across backend and gateway."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Annotated

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel


class ToolErrorCode(str, Enum):
    """Stable error codes for tool contracts across layers."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    BACKEND_ERROR = "BACKEND_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"


class TransactionStatus(str, Enum):
    """Closed set of transaction statuses accepted on the wire."""

    PENDING = "Pending"
    POSTED = "Posted"


INCOMING_METHOD_CODE = -1
OUTGOING_METHOD_CODE = -2
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: object) -> object:
    """Accept epoch milliseconds as well as ISO-8601 strings for timestamps."""

    if isinstance(value, bool):
        raise ValueError("timestamp must be an ISO-8601 string or epoch milliseconds")
    if isinstance(value, int):
        try:
            return EPOCH + timedelta(milliseconds=value)
        except OverflowError as exc:
            raise ValueError("timestamp out of range") from exc
    return value


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]


def _check_counterparty_name(value: str) -> str:
    if not value.strip():
        raise ValueError("counterpartyName must not be blank")
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MethodMapping(_WireModel):
    model_config = ConfigDict(frozen=True)

    code: int
    name: str


class Transaction(_WireModel):
    """Stored ledger record; frozen so callers can never mutate store state."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    date: Timestamp
    amount: int = Field(strict=True)
    status: TransactionStatus
    counterparty_name: str = Field(min_length=1)
    method_code: int
    note: str | None = None

    @field_validator("counterparty_name")
    @classmethod
    def validate_counterparty_name(cls, value: str) -> str:
        return _check_counterparty_name(value)

    @field_serializer("date", when_used="json")
    def serialize_date(self, value: datetime) -> int:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - EPOCH) // timedelta(milliseconds=1)


class TransactionCreateRequest(_WireModel):
    date: Timestamp
    amount: int = Field(strict=True)
    status: TransactionStatus
    counterparty_name: str = Field(min_length=1)
    method_code: int | None = None
    note: str | None = None

    @field_validator("counterparty_name")
    @classmethod
    def validate_counterparty_name(cls, value: str) -> str:
        return _check_counterparty_name(value)


class TransactionUpdateRequest(_WireModel):
    """Partial update: only fields present in ``model_fields_set`` are applied."""

    transaction_id: int = Field(alias="id")
    date: Timestamp | None = None
    amount: int | None = Field(default=None, strict=True)
    status: TransactionStatus | None = None
    counterparty_name: str | None = Field(default=None, min_length=1)
    method_code: int | None = None
    note: str | None = None

    @field_validator("date", "amount", "status", "counterparty_name")
    @classmethod
    def reject_null_required_fields(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be cleared")
        if info.field_name == "counterparty_name":
            return _check_counterparty_name(value)
        return value

    def changes(self) -> dict[str, object]:
        """Return the supplied fields, excluding the target id."""

        return {
            field_name: getattr(self, field_name)
            for field_name in self.model_fields_set
            if field_name != "transaction_id"
        }


class TransactionDeleteRequest(_WireModel):
    transaction_id: int = Field(alias="id")


class TransactionsByMethodRequest(_WireModel):
    method_code: int


class TransactionsListResult(_WireModel):
    items: list[Transaction]
    count: int


class BalanceResult(_WireModel):
    balance: int
    count: int


class MethodMapResult(_WireModel):
    items: list[MethodMapping]


class ToolError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: ToolErrorCode
    message: str
    details: dict[str, object] | None = None
