# -*- coding: utf-8 -*-
"""
backend/tests/conftest.py

Config global de tests para Colabora.

- Fija PYTHON_ENV=test ANTES de importar la app (settings se cachean).
- Base de datos SQLite en memoria (aiosqlite + StaticPool) con claves
  foráneas activas, recreada en cada test.
- Storage en memoria (InMemoryObjectStorage) en lugar de Supabase.
- Cliente httpx asíncrono contra la app con ciclo de vida (asgi-lifespan).
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import datetime as dt
from collections.abc import AsyncIterator

import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.database import Base, enable_sqlite_foreign_keys
from app.shared.storage import InMemoryObjectStorage

# Pre-carga de modelos para que create_all vea todas las tablas
import app.modules.auth.models  # noqa: F401
import app.modules.projects.models  # noqa: F401
import app.modules.comments.models  # noqa: F401

from app.modules.auth.security import create_access_token
from app.modules.projects.schemas import ProjectRequest, RecruitRequest

FIXED_NOW = dt.datetime(2026, 3, 2, 12, 0, 0, tzinfo=dt.timezone.utc)


# -----------------------------------------------------------------------------
# Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(eng)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


# -----------------------------------------------------------------------------
# Colaboradores
# -----------------------------------------------------------------------------
@pytest.fixture
def storage() -> InMemoryObjectStorage:
    return InMemoryObjectStorage()


class MutableClock:
    """Reloj controlable: devuelve `now` y permite avanzar."""

    def __init__(self, now: dt.datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> dt.datetime:
        return self.now

    def advance(self, **kwargs) -> dt.datetime:
        self.now = self.now + dt.timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock()


@pytest.fixture
def make_project_request():
    """Factory de ProjectRequest con valores por defecto razonables."""
    def _make(recruits=(("Backend", 0, 2), ("Frontend", 1, 1)), **overrides) -> ProjectRequest:
        data = {
            "title": "App de voluntariado",
            "soft_skill": "Comunicación",
            "important_question": "¿Cuántas horas puedes dedicar?",
            "tech_stack": "Python, FastAPI",
            "description": "Plataforma para coordinar voluntarios",
            "recruits": [
                RecruitRequest(position=p, current_count=c, target_count=t) for p, c, t in recruits
            ],
        }
        data.update(overrides)
        return ProjectRequest(**data)

    return _make


# -----------------------------------------------------------------------------
# App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def app(session_factory, storage):
    """
    Aplicación principal con get_db y get_object_storage sobreescritos.
    """
    from app.main import app as fastapi_app
    from app.shared.database.database import get_db
    from app.shared.storage import get_object_storage

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    fastapi_app.dependency_overrides[get_object_storage] = lambda: storage
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def auth_headers():
    """Factory de headers Authorization con un JWT real para el usuario dado."""
    def _headers(user_id: int) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers
