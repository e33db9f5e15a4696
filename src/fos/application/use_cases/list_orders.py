from __future__ import annotations

import logging
import string

from fos.application.dto.responses import OrderHeaderResponse
from fos.application.mappers.order_mapper import to_order_header_response
from fos.application.ports.repositories import OrderRepository, StorageError
from fos.config import DEFAULT_ORDER_PAGE_SIZE

logger = logging.getLogger(__name__)


class OrdersFetchFailedError(Exception):
    pass


def parse_page(raw_page: object) -> int:
    """Return a 1-based page number; anything unusable falls back to page 1."""
    if isinstance(raw_page, bool):
        return 1
    if isinstance(raw_page, int):
        page = raw_page
    elif isinstance(raw_page, str):
        digits = raw_page.strip()
        sign = ""
        if digits[:1] in {"+", "-"}:
            sign, digits = digits[0], digits[1:]
        numeric_prefix = ""
        for char in digits:
            if char not in string.digits:
                break
            numeric_prefix += char
        if not numeric_prefix:
            return 1
        page = int(sign + numeric_prefix)
    else:
        return 1
    return page if page > 0 else 1


class ListOrders:
    def __init__(self, order_repository: OrderRepository, page_size: int = DEFAULT_ORDER_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._order_repository = order_repository
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def execute(self, page: object = 1) -> list[OrderHeaderResponse]:
        page_number = parse_page(page)
        offset = (page_number - 1) * self._page_size
        try:
            headers = self._order_repository.list_headers(limit=self._page_size, offset=offset)
        except StorageError as exc:
            logger.exception("past_orders_fetch_failed", extra={"page": page_number})
            raise OrdersFetchFailedError("Failed to fetch past orders") from exc
        return [to_order_header_response(header) for header in headers]

    def execute_all(self) -> list[OrderHeaderResponse]:
        try:
            headers = self._order_repository.list_all_headers()
        except StorageError as exc:
            logger.exception("orders_fetch_failed")
            raise OrdersFetchFailedError("Failed to fetch orders") from exc
        return [to_order_header_response(header) for header in headers]
