from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.pop("OPENAI_API_KEY", None)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.application.interfaces.classifier import ClassificationRequest
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import litter, mother, offspring, report  # noqa: F401
from src.interfaces.http.main import create_app


class FakeClassifier:
    """Returns canned responses and records every request it receives."""

    def __init__(self, responses: list[str] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[ClassificationRequest] = []

    async def classify(self, request: ClassificationRequest) -> str:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError("FakeClassifier has no response queued")
        return self.responses.pop(0)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def fake_classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture()
def app(test_settings: Settings, fake_classifier: FakeClassifier):
    return create_app(settings=test_settings, classifier=fake_classifier)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()
