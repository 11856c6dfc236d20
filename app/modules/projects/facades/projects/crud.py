# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/projects/crud.py

Operaciones CRUD de proyectos: create, update, delete y apertura/cierre
de la convocatoria.

Reglas:
- `position` se deriva siempre de la lista de recruits (build_recruits)
- En update la lista de recruits se reemplaza completa, nunca se mezcla
- Archivo nuevo: se sube ANTES de tocar el anterior y fuera del bloqueo de
  fila; el anterior se borra solo después del commit. Si el commit falla
  se borra el nuevo.
- Delete busca por (dueño, id) en una sola consulta

Transacciones: commit_or_raise es la única fuente de commit/rollback.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.storage import ObjectStorageClient
from app.modules.projects.models import Project, Recruit
from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.schemas import ProjectRequest, RecruitRequest
from app.modules.projects.repositories import project_repository
from app.modules.projects.facades.errors import ProjectNotFound, PermissionDenied
from app.modules.projects.facades.base import Clock, commit_or_raise, is_owner, now_utc
from app.modules.projects.facades.projects.files import ProjectUpload, discard_quietly, store_upload

logger = logging.getLogger(__name__)

POSITION_SEPARATOR = ", "


def build_recruits(items: Sequence[RecruitRequest]) -> Tuple[List[Recruit], str]:
    """
    Construye la lista de Recruit (en orden) y el resumen de posiciones.

    Función pura: no toca la sesión ni el proyecto.

    Returns:
        (recruits, resumen) donde resumen = ", ".join(posiciones); "" si no hay recruits
    """
    recruits = [
        Recruit(
            position=item.position,
            current_count=item.current_count,
            target_count=item.target_count,
            sort_order=index,
        )
        for index, item in enumerate(items)
    ]
    summary = POSITION_SEPARATOR.join(r.position for r in recruits)
    return recruits, summary


async def _get_owned(db: AsyncSession, project_id: int, user_id: int, *, for_update: bool = False) -> Project:
    """
    Obtiene un proyecto (con recruits) y exige ownership.

    Raises:
        ProjectNotFound: el id no existe
        PermissionDenied: el usuario no es el dueño
    """
    project = await project_repository.get_project(db, project_id, for_update=for_update)
    if not project:
        raise ProjectNotFound(project_id)
    if not is_owner(project.user_id, user_id):
        raise PermissionDenied(f"Usuario {user_id} no es propietario del proyecto {project_id}")
    return project


async def create(
    db: AsyncSession,
    storage: ObjectStorageClient,
    request: ProjectRequest,
    upload: Optional[ProjectUpload] = None,
    *,
    user_id: int,
    clock: Clock = now_utc,
) -> Project:
    """
    Crea un proyecto con sus recruits en una sola transacción.

    - Si hay archivo se sube primero; si la subida falla no se persiste nada
      (ProjectFileStorageError).
    - Convocatoria inicial OPEN, view_count 0, created_at = updated_at = clock().
    - Si el commit falla tras subir el archivo, el archivo se elimina.
    """
    file_url = await store_upload(storage, upload) if upload is not None else ""

    async def _work() -> Project:
        now = clock()
        recruits, summary = build_recruits(request.recruits)
        project = Project(
            user_id=user_id,
            title=request.title,
            file_url=file_url,
            deadline=request.deadline,
            soft_skill=request.soft_skill,
            important_question=request.important_question,
            tech_stack=request.tech_stack,
            description=request.description,
            position=summary,
            recruits=recruits,
            recruitment=RecruitmentStatus.OPEN,
            view_count=0,
            created_at=now,
            updated_at=now,
        )
        db.add(project)
        await db.flush()
        return project

    try:
        project = await commit_or_raise(db, _work)
    except Exception:
        if file_url:
            await discard_quietly(storage, file_url, reason="create_rollback")
        raise

    logger.info("project_created project_id=%s user_id=%s recruits=%s", project.project_id, user_id, len(request.recruits))
    return project


async def update(
    db: AsyncSession,
    storage: ObjectStorageClient,
    project_id: int,
    request: ProjectRequest,
    upload: Optional[ProjectUpload] = None,
    *,
    user_id: int,
    clock: Clock = now_utc,
) -> Project:
    """
    Reemplaza los campos mutables y la lista completa de recruits.

    - upload=None conserva el file_url actual.
    - created_at, user_id y view_count no cambian.

    Raises:
        ProjectNotFound: el id no existe
        PermissionDenied: el usuario no es el dueño (sin mutaciones ni llamadas a storage)
        ProjectFileStorageError: falló la subida del nuevo archivo (proyecto sin cambios)
    """
    # Validación sin bloqueo: la subida del archivo no retiene la fila
    try:
        await _get_owned(db, project_id, user_id)
    except (ProjectNotFound, PermissionDenied):
        await db.rollback()
        raise

    new_file_url: Optional[str] = None
    if upload is not None:
        try:
            new_file_url = await store_upload(storage, upload)
        except Exception:
            await db.rollback()
            raise

    old_file_url = ""

    async def _work() -> Project:
        nonlocal old_file_url
        project = await _get_owned(db, project_id, user_id, for_update=True)
        old_file_url = project.file_url or ""
        recruits, summary = build_recruits(request.recruits)
        project.title = request.title
        project.deadline = request.deadline
        project.soft_skill = request.soft_skill
        project.important_question = request.important_question
        project.tech_stack = request.tech_stack
        project.description = request.description
        # Reemplazo completo: los recruits anteriores se eliminan como huérfanos
        project.recruits = recruits
        project.position = summary
        if new_file_url is not None:
            project.file_url = new_file_url
        project.updated_at = clock()
        await db.flush()
        return project

    try:
        project = await commit_or_raise(db, _work)
    except Exception:
        if new_file_url:
            await discard_quietly(storage, new_file_url, reason="update_rollback")
        raise

    if new_file_url and old_file_url:
        await discard_quietly(storage, old_file_url, reason="replaced")

    logger.info("project_updated project_id=%s file_replaced=%s", project_id, new_file_url is not None)
    return project


async def delete(
    db: AsyncSession,
    storage: ObjectStorageClient,
    project_id: int,
    *,
    user_id: int,
) -> bool:
    """
    Elimina un proyecto del usuario (hard delete) y luego su archivo.

    Recruits, favoritos y comentarios se eliminan en cascada.
    Un fallo al borrar el archivo solo se registra (objeto huérfano).

    Raises:
        ProjectNotFound: no existe un proyecto con ese id y ese dueño
    """
    async def _work() -> str:
        project = await project_repository.get_owned_project(db, user_id, project_id)
        if not project:
            raise ProjectNotFound(project_id)
        file_url = project.file_url or ""
        await db.delete(project)
        return file_url

    file_url = await commit_or_raise(db, _work)

    if file_url:
        await discard_quietly(storage, file_url, reason="project_deleted")

    logger.info("project_deleted project_id=%s user_id=%s", project_id, user_id)
    return True


async def change_recruitment(
    db: AsyncSession,
    project_id: int,
    recruitment: RecruitmentStatus,
    *,
    user_id: int,
    clock: Clock = now_utc,
) -> Project:
    """
    Abre o cierra la convocatoria. Solo el dueño.
    """
    async def _work() -> Project:
        project = await _get_owned(db, project_id, user_id, for_update=True)
        project.recruitment = recruitment
        project.updated_at = clock()
        return project

    return await commit_or_raise(db, _work)


__all__ = [
    "POSITION_SEPARATOR",
    "build_recruits",
    "create",
    "update",
    "delete",
    "change_recruitment",
]
# Fin del archivo backend/app/modules/projects/facades/projects/crud.py
