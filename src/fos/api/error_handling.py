from __future__ import annotations

import logging
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fos.api.middleware.request_id import get_request_id
from fos.application.use_cases.contact import ContactFormIncompleteError
from fos.application.use_cases.create_order import InvalidOrderError, OrderCreationFailedError
from fos.application.use_cases.food_of_the_day import FoodNotFoundError
from fos.application.use_cases.get_order import OrderFetchFailedError, OrderNotFoundError
from fos.application.use_cases.list_foods import CatalogFetchFailedError
from fos.application.use_cases.list_orders import OrdersFetchFailedError
from fos.domain.order.cart import InvalidItemError

logger = logging.getLogger(__name__)


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
            "requestId": get_request_id(),
        },
    )


def _exception_handler(status_code: int, code: str, message: str | None = None):
    async def handler(_: Request, exc: Exception) -> JSONResponse:
        details = getattr(exc, "details", None)
        return _error_response(
            status_code=status_code,
            code=code,
            message=message or str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}

# Storage failures carry a fixed message; the driver error is only logged.
ERROR_MAPPINGS: tuple[tuple[type[Exception], int, str, str | None], ...] = (
    (InvalidOrderError, 400, "INVALID_ORDER", "Invalid order data"),
    (InvalidItemError, 400, "INVALID_ITEM", "Invalid item data"),
    (OrderCreationFailedError, 500, "ORDER_CREATE_FAILED", "Failed to create order"),
    (OrderNotFoundError, 404, "ORDER_NOT_FOUND", "Order not found"),
    (OrderFetchFailedError, 500, "ORDER_FETCH_FAILED", "Failed to fetch order"),
    (OrdersFetchFailedError, 500, "ORDERS_FETCH_FAILED", None),
    (FoodNotFoundError, 404, "FOOD_NOT_FOUND", "Food not found"),
    (CatalogFetchFailedError, 500, "CATALOG_FETCH_FAILED", None),
    (ContactFormIncompleteError, 400, "CONTACT_FORM_INCOMPLETE", "All fields are required"),
)


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    return _error_response(
        status_code=http_exc.status_code,
        code=_HTTP_ERROR_CODES.get(http_exc.status_code, "HTTP_ERROR"),
        message=str(http_exc.detail) if http_exc.detail else "request failed",
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": jsonable_encoder(validation_exc.errors())},
    )


async def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", exc_info=exc)
    return _error_response(
        status_code=500,
        code="INTERNAL_ERROR",
        message="internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    for exc_cls, status_code, code, message in ERROR_MAPPINGS:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code, message))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
