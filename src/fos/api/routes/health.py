from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import Engine

from fos.api.dependencies import get_engine
from fos.infrastructure.cache.redis_client import ping_redis
from fos.infrastructure.db.session import ping_database

router = APIRouter()


@router.get("/health/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready")
def ready(
    request: Request,
    response: Response,
    engine: Engine = Depends(get_engine),
) -> dict[str, object]:
    checks: dict[str, bool] = {"database": ping_database(engine)}
    redis_client = getattr(request.app.state, "redis_client", None)
    if redis_client is not None:
        checks["redis"] = ping_redis(redis_client)

    if all(checks.values()):
        return {"status": "ok"}

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": "unavailable", "checks": checks}
