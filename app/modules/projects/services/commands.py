# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/commands.py

Capa de aplicación (comandos/mutaciones) del módulo Projects.
Orquesta ProjectFacade y NO reimplementa reglas de dominio.
Devuelve los mensajes de confirmación que la API envía al cliente.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.storage import ObjectStorageClient
from app.modules.projects.facades import ProjectFacade, ProjectUpload, now_utc
from app.modules.projects.facades.base import Clock
from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.schemas import ProjectRequest

MSG_PROJECT_SAVED = "Proyecto guardado"
MSG_PROJECT_UPDATED = "Proyecto actualizado"
MSG_PROJECT_DELETED = "Proyecto eliminado"


class ProjectsCommandService:
    """Comandos: crear, actualizar, eliminar, abrir/cerrar convocatoria, favoritos."""

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient, clock: Clock = now_utc):
        self.db = db
        self.facade = ProjectFacade(db, storage, clock)

    # ---- Crear / actualizar / eliminar ----
    async def create_project(
        self,
        request: ProjectRequest,
        upload: Optional[ProjectUpload] = None,
        *,
        user_id: int,
    ) -> str:
        await self.facade.create(request, upload, user_id=user_id)
        return MSG_PROJECT_SAVED

    async def update_project(
        self,
        project_id: int,
        request: ProjectRequest,
        upload: Optional[ProjectUpload] = None,
        *,
        user_id: int,
    ) -> str:
        await self.facade.update(project_id, request, upload, user_id=user_id)
        return MSG_PROJECT_UPDATED

    async def delete_project(self, project_id: int, *, user_id: int) -> str:
        await self.facade.delete(project_id, user_id=user_id)
        return MSG_PROJECT_DELETED

    # ---- Convocatoria ----
    async def change_recruitment(
        self,
        project_id: int,
        recruitment: RecruitmentStatus,
        *,
        user_id: int,
    ):
        return await self.facade.change_recruitment(project_id, recruitment, user_id=user_id)

    # ---- Favoritos ----
    async def mark_favorite(self, project_id: int, *, user_id: int) -> bool:
        return await self.facade.mark_favorite(project_id, user_id=user_id)

    async def unmark_favorite(self, project_id: int, *, user_id: int) -> bool:
        return await self.facade.unmark_favorite(project_id, user_id=user_id)
# Fin del archivo backend/app/modules/projects/services/commands.py
