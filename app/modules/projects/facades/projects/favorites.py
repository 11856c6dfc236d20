# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/projects/favorites.py

Marcar / desmarcar proyectos como favoritos. Ambas operaciones son idempotentes.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.projects.repositories import favorite_repository, project_repository
from app.modules.projects.facades.errors import ProjectNotFound
from app.modules.projects.facades.base import Clock, commit_or_raise, now_utc

logger = logging.getLogger(__name__)


async def mark_favorite(
    db: AsyncSession,
    project_id: int,
    *,
    user_id: int,
    clock: Clock = now_utc,
) -> bool:
    """
    Marca el proyecto como favorito del usuario.

    Returns:
        True si se creó la marca, False si ya existía.

    Raises:
        ProjectNotFound: el proyecto no existe
    """
    async def _work() -> bool:
        if not await project_repository.project_exists(db, project_id):
            raise ProjectNotFound(project_id)
        if await favorite_repository.get_favorite(db, user_id, project_id):
            return False
        await favorite_repository.add_favorite(db, user_id, project_id, clock())
        return True

    try:
        return await commit_or_raise(db, _work)
    except IntegrityError:
        # Otra request marcó el mismo favorito entre la lectura y el insert
        logger.info("favorite_already_marked project_id=%s user_id=%s", project_id, user_id)
        return False


async def unmark_favorite(db: AsyncSession, project_id: int, *, user_id: int) -> bool:
    """
    Quita la marca. Devuelve True si existía.
    """
    async def _work() -> bool:
        return await favorite_repository.remove_favorite(db, user_id, project_id)

    return await commit_or_raise(db, _work)


__all__ = ["mark_favorite", "unmark_favorite"]
