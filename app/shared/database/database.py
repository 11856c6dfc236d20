# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async (asyncpg en PostgreSQL, aiosqlite en pruebas).

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- check_database_health()

Notas:
- En PostgreSQL se aplica SET SESSION statement_timeout al abrir cada sesión.
- La URL sale de settings.database_url (DB_URL o componentes DB_*).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)

DATABASE_URL: str = settings.database_url
DB_ECHO_SQL: bool = bool(settings.db_echo_sql)
DB_SESSION_STATEMENT_TIMEOUT_MS: int = int(settings.db_statement_timeout_ms)

_IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _engine_kwargs() -> dict:
    """Parámetros del engine según el dialecto."""
    if _IS_SQLITE:
        # Una sola conexión compartida: necesaria para SQLite en memoria
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_recycle": 1800,
    }


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """
    Activa PRAGMA foreign_keys en cada conexión SQLite nueva.
    Sin esto SQLite ignora ON DELETE CASCADE.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


logger.debug("[DB] Engine → %s (echo=%s)", DATABASE_URL.split("@")[-1], DB_ECHO_SQL)

engine = create_async_engine(DATABASE_URL, echo=DB_ECHO_SQL, **_engine_kwargs())
if _IS_SQLITE:
    enable_sqlite_foreign_keys(engine)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Hook de configuración por sesión
async def _configure_session(session: AsyncSession) -> None:
    """
    Aplica configuraciones por sesión:
    - SET SESSION statement_timeout para limitar consultas largas (solo PostgreSQL).
    """
    if _IS_SQLITE:
        return
    try:
        await session.execute(text(f"SET SESSION statement_timeout = {DB_SESSION_STATEMENT_TIMEOUT_MS}"))
    except SQLAlchemyError as e:
        # No es fatal si el backend no soporta el comando
        logger.debug(f"[DB] No se pudo aplicar statement_timeout de sesión: {e}")


async def _finish(session: AsyncSession) -> None:
    if session.in_transaction():
        await session.rollback()


# ── Dependencias FastAPI
# Usada por los routers (tests la sobreescriben vía dependency_overrides)
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        await _configure_session(session)
        try:
            yield session
        finally:
            await _finish(session)


# ── Context manager fuera de requests (health check)
@asynccontextmanager
async def session_scope(configure: bool = True) -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        if configure:
            await _configure_session(session)
        try:
            yield session
            # El commit/rollback queda a cargo de quien use el scope
        finally:
            await _finish(session)


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with session_scope(configure=False) as session:
                await session.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] Health check fallido: %r", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "enable_sqlite_foreign_keys",
    "get_db",
    "session_scope",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
