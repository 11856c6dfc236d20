# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/repositories/favorite_repository.py

Acceso a datos de favoritos (ProjectFavorite). Sin commit: lo hace el facade.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.projects.models import ProjectFavorite


async def get_favorite(db: AsyncSession, user_id: int, project_id: int) -> Optional[ProjectFavorite]:
    stmt = select(ProjectFavorite).where(
        ProjectFavorite.user_id == user_id,
        ProjectFavorite.project_id == project_id,
    )
    return (await db.execute(stmt)).scalar_one_or_none()


async def add_favorite(db: AsyncSession, user_id: int, project_id: int, created_at: datetime) -> ProjectFavorite:
    favorite = ProjectFavorite(user_id=user_id, project_id=project_id, created_at=created_at)
    db.add(favorite)
    await db.flush()
    return favorite


async def remove_favorite(db: AsyncSession, user_id: int, project_id: int) -> bool:
    stmt = delete(ProjectFavorite).where(
        ProjectFavorite.user_id == user_id,
        ProjectFavorite.project_id == project_id,
    )
    res = await db.execute(stmt)
    return bool(res.rowcount)


__all__ = ["get_favorite", "add_favorite", "remove_favorite"]
