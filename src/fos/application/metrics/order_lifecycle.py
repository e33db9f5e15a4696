from __future__ import annotations

from prometheus_client import Counter, Histogram

ORDERS_CREATED_TOTAL = Counter(
    "fos_orders_created_total",
    "Total number of orders committed.",
)

ORDER_CREATE_FAILURES_TOTAL = Counter(
    "fos_order_create_failures_total",
    "Total number of rejected or rolled back order creations.",
    ["reason"],
)

ORDER_LINES_PER_ORDER = Histogram(
    "fos_order_lines_per_order",
    "Number of cart selections submitted per order.",
    buckets=(1, 2, 3, 5, 8, 13, 21, 50),
)

ORDER_READS_TOTAL = Counter(
    "fos_order_reads_total",
    "Total number of single-order reads by outcome.",
    ["outcome"],
)


def record_order_created(selection_count: int) -> None:
    ORDERS_CREATED_TOTAL.inc()
    ORDER_LINES_PER_ORDER.observe(selection_count)


def record_order_create_failure(reason: str) -> None:
    ORDER_CREATE_FAILURES_TOTAL.labels(reason=reason).inc()


def record_order_read(outcome: str) -> None:
    ORDER_READS_TOTAL.labels(outcome=outcome).inc()
