# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/repositories/project_repository.py

Repositorio para acceso a datos de proyectos (Project).

Responsabilidades:
- Lecturas por id / por (dueño, id)
- Listados paginados (búsqueda, por dueño, favoritos, hot)
- Incremento del contador de vistas

La lógica de negocio (ownership, recruits, archivos, flag "recent")
permanece en los facades, no en el repositorio.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.models import Project, ProjectFavorite
from app.modules.projects.schemas import ProjectSearchParams


# === Lecturas puntuales ===

async def get_project(db: AsyncSession, project_id: int, *, for_update: bool = False) -> Optional[Project]:
    """
    Obtiene un proyecto con sus recruits.

    for_update=True toma el bloqueo de fila (FOR UPDATE) y refresca la
    instancia si ya estaba en la sesión. SQLite ignora el bloqueo.
    """
    stmt = (
        select(Project)
        .options(selectinload(Project.recruits))
        .where(Project.project_id == project_id)
    )
    if for_update:
        stmt = stmt.with_for_update().execution_options(populate_existing=True)
    return (await db.execute(stmt)).scalars().first()


async def get_owned_project(db: AsyncSession, user_id: int, project_id: int) -> Optional[Project]:
    """
    Busca por (dueño, id) en una sola consulta: un proyecto ajeno es
    indistinguible de uno inexistente.
    """
    stmt = (
        select(Project)
        .options(selectinload(Project.recruits))
        .where(Project.user_id == user_id, Project.project_id == project_id)
    )
    return (await db.execute(stmt)).scalars().first()


async def project_exists(db: AsyncSession, project_id: int) -> bool:
    stmt = select(Project.project_id).where(Project.project_id == project_id)
    return (await db.execute(stmt)).scalar_one_or_none() is not None


async def increment_view_count(db: AsyncSession, project_id: int) -> int:
    """
    UPDATE projects SET view_count = view_count + 1. No hace commit.
    Devuelve el número de filas afectadas (0 si el proyecto no existe).
    """
    stmt = (
        update(Project)
        .where(Project.project_id == project_id)
        .values(view_count=Project.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    res = await db.execute(stmt)
    return res.rowcount or 0


async def get_project_detail(db: AsyncSession, project_id: int) -> Optional[Tuple[Project, int]]:
    """
    Devuelve (proyecto con recruits, conteo de favoritos) o None.
    populate_existing: el contador de vistas se actualizó con un UPDATE masivo.
    """
    stmt = (
        select(Project)
        .options(selectinload(Project.recruits))
        .where(Project.project_id == project_id)
        .execution_options(populate_existing=True)
    )
    project = (await db.execute(stmt)).scalars().first()
    if project is None:
        return None

    favorites = await db.scalar(
        select(func.count(ProjectFavorite.favorite_id)).where(ProjectFavorite.project_id == project_id)
    )
    return project, int(favorites or 0)


# === Listados ===

def _apply_search(stmt, search: Optional[ProjectSearchParams]):
    if search is None:
        return stmt
    if search.keyword:
        stmt = stmt.where(
            Project.title.icontains(search.keyword, autoescape=True)
            | Project.description.icontains(search.keyword, autoescape=True)
        )
    if search.position:
        stmt = stmt.where(Project.position.icontains(search.position, autoescape=True))
    if search.tech_stack:
        stmt = stmt.where(Project.tech_stack.icontains(search.tech_stack, autoescape=True))
    if search.recruitment is not None:
        stmt = stmt.where(Project.recruitment == search.recruitment)
    return stmt


async def search_projects(
    db: AsyncSession,
    search: Optional[ProjectSearchParams] = None,
    *,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[Project], int]:
    """
    Listado general con filtros opcionales, más nuevos primero.

    Returns:
        (items de la página, total de elementos que cumplen el filtro)
    """
    total = await db.scalar(_apply_search(select(func.count(Project.project_id)), search)) or 0

    stmt = _apply_search(select(Project), search)
    stmt = stmt.order_by(Project.created_at.desc(), Project.project_id.desc())
    stmt = stmt.offset(offset).limit(limit)
    items = list((await db.execute(stmt)).scalars().all())
    return items, int(total)


async def list_projects_by_user(
    db: AsyncSession,
    user_id: int,
    *,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[Project], int]:
    """Proyectos publicados por el usuario, más nuevos primero."""
    total = await db.scalar(
        select(func.count(Project.project_id)).where(Project.user_id == user_id)
    ) or 0

    stmt = (
        select(Project)
        .where(Project.user_id == user_id)
        .order_by(Project.created_at.desc(), Project.project_id.desc())
        .offset(offset)
        .limit(limit)
    )
    items = list((await db.execute(stmt)).scalars().all())
    return items, int(total)


async def list_favorite_projects(
    db: AsyncSession,
    user_id: int,
    *,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[Project], int]:
    """Proyectos marcados como favoritos por el usuario, marcados más recientemente primero."""
    total = await db.scalar(
        select(func.count(ProjectFavorite.favorite_id)).where(ProjectFavorite.user_id == user_id)
    ) or 0

    stmt = (
        select(Project)
        .join(ProjectFavorite, ProjectFavorite.project_id == Project.project_id)
        .where(ProjectFavorite.user_id == user_id)
        .order_by(ProjectFavorite.created_at.desc(), ProjectFavorite.favorite_id.desc())
        .offset(offset)
        .limit(limit)
    )
    items = list((await db.execute(stmt)).scalars().all())
    return items, int(total)


async def list_hot_projects(db: AsyncSession, size: int) -> List[Project]:
    """Proyectos abiertos con más vistas (desempate: más nuevo primero)."""
    stmt = (
        select(Project)
        .where(Project.recruitment == RecruitmentStatus.OPEN)
        .order_by(Project.view_count.desc(), Project.created_at.desc(), Project.project_id.desc())
        .limit(size)
    )
    return list((await db.execute(stmt)).scalars().all())


__all__ = [
    "get_project",
    "get_owned_project",
    "project_exists",
    "increment_view_count",
    "get_project_detail",
    "search_projects",
    "list_projects_by_user",
    "list_favorite_projects",
    "list_hot_projects",
]
# Fin del archivo backend/app/modules/projects/repositories/project_repository.py
