from __future__ import annotations

import logging
import time

from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.routing import Match

logger = logging.getLogger("fos.api.access")

HTTP_REQUESTS = Counter(
    "fos_http_requests_total",
    "HTTP requests by route template and status",
    ["method", "route", "status_code"],
)
HTTP_LATENCY = Histogram(
    "fos_http_request_duration_seconds",
    "HTTP request latency by route template",
    ["method", "route"],
)

UNMATCHED_ROUTE = "<unmatched>"


def route_template(request: Request) -> str:
    """Label by template (``/api/past-order/{order_id}``), never by raw path."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match is Match.FULL:
            return getattr(route, "path", UNMATCHED_ROUTE)
    return UNMATCHED_ROUTE


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        route = route_template(request)
        try:
            response = await call_next(request)
        except Exception:
            self._observe(request, route, 500, started, failed=True)
            raise
        self._observe(request, route, response.status_code, started)
        return response

    @staticmethod
    def _observe(
        request: Request,
        route: str,
        status_code: int,
        started: float,
        failed: bool = False,
    ) -> None:
        elapsed = time.perf_counter() - started
        HTTP_REQUESTS.labels(
            method=request.method, route=route, status_code=str(status_code)
        ).inc()
        HTTP_LATENCY.labels(method=request.method, route=route).observe(elapsed)

        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(elapsed * 1000, 2),
        }
        if failed:
            logger.exception("request_error", extra=extra)
        else:
            logger.info("request_complete", extra=extra)
