"""FastAPI entrypoint exposing ledger operations over HTTP."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse

from backend.factory import build_backend_tool_service
from gateway.backend_client import BackendClient
from gateway.tool_router import ToolRouter
from shared import config as _config
from shared.logging_config import setup_logging
from shared.models import ToolError, ToolErrorCode


setup_logging(_config.log_level())

logger = logging.getLogger(__name__)


_ERROR_STATUS_CODES = {
    ToolErrorCode.NOT_FOUND: 404,
    ToolErrorCode.VALIDATION_ERROR: 400,
    ToolErrorCode.UNKNOWN_TOOL: 400,
}


@lru_cache(maxsize=1)
def get_tool_router() -> ToolRouter:
    """Create and cache the tool router once per process."""
    backend_client = BackendClient(tool_service=build_backend_tool_service())
    return ToolRouter(backend_client=backend_client)


def _call_tool(tool_name: str, payload: dict[str, Any] | None = None) -> Any:
    result = get_tool_router().call(tool_name, payload or {})
    if isinstance(result, ToolError):
        status_code = _ERROR_STATUS_CODES.get(result.code, 500)
        detail: dict[str, Any] = {"code": result.code.value, "message": result.message}
        if result.details:
            detail["details"] = result.details
        raise HTTPException(status_code=status_code, detail=jsonable_encoder(detail))
    return jsonable_encoder(result)


app = FastAPI(title="Transaction Ledger API")

ALLOW_ORIGINS = _config.cors_allow_origins()


@app.middleware("http")
async def log_http_requests(request: Request, call_next):
    """Log incoming requests, HTTP status codes and unexpected errors."""

    logger.info("http_request_received method=%s path=%s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "http_request_failed method=%s path=%s",
            request.method,
            request.url.path,
        )
        raise

    logger.info(
        "http_response_sent method=%s path=%s status_code=%s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("cors_allow_origins=%s", ALLOW_ORIGINS)


@app.exception_handler(Exception)
async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Return a JSON 500 response for unhandled exceptions."""

    logger.exception(
        "unhandled_exception method=%s path=%s exception_type=%s message=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health")
def health() -> dict[str, str]:
    """Healthcheck endpoint."""

    return {"status": "ok"}


@app.get("/ledger/transactions")
def list_transactions(method_code: int | None = Query(default=None, alias="methodCode")) -> Any:
    """List every transaction, or only those recorded with ``methodCode``."""

    if method_code is None:
        return _call_tool("ledger_transactions_list")
    return _call_tool("ledger_transactions_by_method", {"method_code": method_code})


@app.get("/ledger/balance")
def get_balance() -> Any:
    return _call_tool("ledger_balance_get")


@app.get("/ledger/methods")
def get_method_map() -> Any:
    return _call_tool("ledger_method_map")


@app.post("/ledger/transactions", status_code=201)
def create_transaction(payload: dict[str, Any] = Body(...)) -> Any:
    return _call_tool("ledger_transactions_create", payload)


@app.patch("/ledger/transactions/{transaction_id}")
def update_transaction(transaction_id: int, payload: dict[str, Any] = Body(...)) -> Any:
    """Apply a partial update to the transaction addressed by the path."""

    if "id" in payload or "transaction_id" in payload:
        raise HTTPException(
            status_code=400,
            detail={"code": ToolErrorCode.VALIDATION_ERROR.value, "message": "id is not updatable"},
        )
    return _call_tool("ledger_transactions_update", {**payload, "id": transaction_id})


@app.delete("/ledger/transactions/{transaction_id}")
def delete_transaction(transaction_id: int) -> Any:
    return _call_tool("ledger_transactions_delete", {"id": transaction_id})
