from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fos.api.main import create_app
from fos.config import Settings, load_settings
from fos.infrastructure.db.models import order as _order_models  # noqa: F401
from fos.infrastructure.db.models.menu import Base
from fos.infrastructure.db.repositories.catalog_repo import SqlAlchemyCatalogRepository
from fos.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository
from fos.infrastructure.db.session import build_engine
from fos.tools.seed import seed_catalog


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'food.sqlite'}"


@pytest.fixture
def engine(database_url: str) -> Iterator[Engine]:
    engine = build_engine(database_url)
    Base.metadata.create_all(engine)
    seed_catalog(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def order_repository(engine: Engine) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(engine)


@pytest.fixture
def catalog_repository(engine: Engine) -> SqlAlchemyCatalogRepository:
    return SqlAlchemyCatalogRepository(engine)


@pytest.fixture
def settings(database_url: str, tmp_path: Path) -> Settings:
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "hello.txt").write_text("hello", encoding="utf-8")
    return replace(
        load_settings(),
        database_url=database_url,
        redis_url=None,
        order_page_size=20,
        public_dir=public_dir,
    )


@pytest.fixture
def client(engine: Engine, settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client
