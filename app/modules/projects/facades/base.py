# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/base.py

Utilidades base compartidas por todos los facades de proyectos.
Helpers de timestamps, ownership y operaciones transaccionales.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

import datetime as dt
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar('T')

Clock = Callable[[], dt.datetime]


def now_utc() -> dt.datetime:
    """
    Retorna timestamp actual UTC.

    Es el reloj por defecto de facades y servicios; los tests inyectan otro.
    """
    return dt.datetime.now(dt.timezone.utc)


def is_owner(owner_id: Any, user_id: Any) -> bool:
    """
    Compara identidades de usuario por valor (normalizadas a str).
    """
    if owner_id is None or user_id is None:
        return False
    return str(owner_id) == str(user_id)


async def commit_or_raise(db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito.
    Aplica rollback y re-lanza si work() o el commit fallan.

    Args:
        db: AsyncSession SQLAlchemy
        work: Corrutina a ejecutar dentro de la transacción

    Returns:
        Resultado de work()
    """
    try:
        result = await work()
        await db.commit()
        return result
    except Exception:
        await db.rollback()
        raise


__all__ = [
    "Clock",
    "now_utc",
    "is_owner",
    "commit_or_raise",
]
# Fin del archivo backend/app/modules/projects/facades/base.py
