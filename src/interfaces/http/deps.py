from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.interfaces.classifier import PerformanceClassifier
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_classifier(request: Request) -> PerformanceClassifier | None:
    # None when no credential is configured; summarize_report reports that as an error
    return getattr(request.app.state, "classifier", None)


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()
