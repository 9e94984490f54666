from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from herdline.config.settings import Settings, get_settings
from herdline.domain.services.offspring import OffspringGenerator
from herdline.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_offspring_generator(request: Request) -> OffspringGenerator:
    random_source = getattr(request.app.state, "random_source", None)
    if random_source is None:
        raise RuntimeError("Random source not configured")
    return OffspringGenerator(random_source)
