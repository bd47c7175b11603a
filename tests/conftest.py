from pathlib import Path
import sys
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.main import create_app
from app.repositories.user_repository import SqlAlchemyUserRepository
from app.routers.users import get_user_repository


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def client(engine):
    app = create_app(engine=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def mock_repository():
    return create_autospec(SqlAlchemyUserRepository, instance=True)


@pytest.fixture()
def mock_client(engine, mock_repository):
    app = create_app(engine=engine)
    app.dependency_overrides[get_user_repository] = lambda: mock_repository
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
