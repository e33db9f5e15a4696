from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, wait

from fos.application.dto.responses import OrderDetailResponse
from fos.application.mappers.order_mapper import assemble_order, to_order_detail_response
from fos.application.metrics.order_lifecycle import record_order_read
from fos.application.ports.repositories import OrderRepository, StorageError
from fos.domain.common.ids import OrderId

logger = logging.getLogger(__name__)


class OrderNotFoundError(Exception):
    pass


class OrderFetchFailedError(Exception):
    pass


class GetOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        executor: Executor | None = None,
    ) -> None:
        self._order_repository = order_repository
        self._executor = executor

    def execute(self, order_id: OrderId) -> OrderDetailResponse:
        """Read the header and the priced lines concurrently.

        Both queries are awaited before either result is looked at, so a
        failure in one is never hidden by the other finishing first.
        """
        if self._executor is not None:
            return self._execute_concurrently(self._executor, order_id)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="order-read") as executor:
            return self._execute_concurrently(executor, order_id)

    def execute_sequential(self, order_id: OrderId) -> OrderDetailResponse:
        try:
            header = self._order_repository.get_header(order_id)
            if header is None:
                record_order_read("not_found")
                raise OrderNotFoundError(f"order {order_id} not found")
            rows = self._order_repository.get_line_rows(order_id)
            detail = assemble_order(header, rows)
        except StorageError as exc:
            record_order_read("error")
            logger.exception("order_fetch_failed", extra={"order_id": int(order_id)})
            raise OrderFetchFailedError("Failed to fetch order") from exc

        record_order_read("ok")
        return to_order_detail_response(detail)

    def _execute_concurrently(self, executor: Executor, order_id: OrderId) -> OrderDetailResponse:
        header_future = executor.submit(self._order_repository.get_header, order_id)
        rows_future = executor.submit(self._order_repository.get_line_rows, order_id)
        wait([header_future, rows_future])

        try:
            header = header_future.result()
            if header is None:
                rows_error = rows_future.exception()
                if rows_error is not None:
                    logger.warning(
                        "order_lines_fetch_failed_for_missing_order",
                        extra={"order_id": int(order_id)},
                        exc_info=rows_error,
                    )
                record_order_read("not_found")
                raise OrderNotFoundError(f"order {order_id} not found")
            detail = assemble_order(header, rows_future.result())
        except StorageError as exc:
            record_order_read("error")
            logger.exception("order_fetch_failed", extra={"order_id": int(order_id)})
            raise OrderFetchFailedError("Failed to fetch order") from exc

        record_order_read("ok")
        return to_order_detail_response(detail)
