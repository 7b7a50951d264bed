"""Composition root for backend services."""

from __future__ import annotations

import logging

from backend.repositories.methods_repository import InMemoryMethodsRepository
from backend.repositories.transactions_repository import InMemoryTransactionsRepository
from backend.services.tools import BackendToolService
from shared import config
from shared.models import TransactionCreateRequest


logger = logging.getLogger(__name__)


_DEMO_TIMESTAMP = "2023-09-24T23:29:56.901Z"
_DEMO_TRANSACTIONS: tuple[dict[str, object], ...] = (
    {"amount": 1, "status": "Pending", "counterparty_name": "Test01", "method_code": -1},
    {"amount": -1, "status": "Pending", "counterparty_name": "Test02", "method_code": -2},
    {"amount": 2, "status": "Posted", "counterparty_name": "Test03", "method_code": -1},
    {"amount": -2, "status": "Posted", "counterparty_name": "Test04", "method_code": -2},
)


def seed_demo_transactions(repository: InMemoryTransactionsRepository) -> None:
    """Insert the demo ledger used for manual testing."""

    for index, fields in enumerate(_DEMO_TRANSACTIONS, start=1):
        repository.create_transaction(
            TransactionCreateRequest.model_validate(
                {
                    **fields,
                    "date": _DEMO_TIMESTAMP,
                    "note": f"TestValue{index}, please ignore",
                }
            )
        )


def build_transactions_repository(*, seed: bool | None = None) -> InMemoryTransactionsRepository:
    """Build the in-memory ledger store, optionally seeded with demo rows."""

    repository = InMemoryTransactionsRepository(methods=InMemoryMethodsRepository())
    if seed is None:
        seed = config.seed_demo_data()
    if seed:
        seed_demo_transactions(repository)
        logger.info("ledger_demo_data_seeded count=%s", len(_DEMO_TRANSACTIONS))
    return repository


def build_backend_tool_service(*, seed: bool | None = None) -> BackendToolService:
    """Build backend tool service with repository adapters."""

    return BackendToolService(transactions_repository=build_transactions_repository(seed=seed))
