# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/project_facade.py

Facade público para operaciones de escritura sobre proyectos.
Mantiene API estable delegando a módulos internos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.storage import ObjectStorageClient
from app.modules.projects.models import Project
from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.schemas import ProjectRequest

from .base import Clock, now_utc
from . import projects
from .projects import ProjectUpload


class ProjectFacade:
    """
    Facade público para gestión de proyectos.

    Reglas de dominio implementadas (ver facades/projects/crud.py):
    1. Resumen de posiciones derivado de los recruits
    2. Reemplazo completo de recruits en update
    3. Solo el dueño modifica o elimina
    4. Archivo nuevo subido antes de borrar el anterior
    """

    def __init__(self, db: AsyncSession, storage: ObjectStorageClient, clock: Clock = now_utc):
        """
        Args:
            db: Sesión SQLAlchemy activa
            storage: Object storage para archivos adjuntos
            clock: Fuente de tiempo (inyectable en tests)
        """
        self.db = db
        self.storage = storage
        self.clock = clock

    async def create(
        self,
        request: ProjectRequest,
        upload: Optional[ProjectUpload] = None,
        *,
        user_id: int,
    ) -> Project:
        return await projects.create(
            self.db,
            self.storage,
            request,
            upload,
            user_id=user_id,
            clock=self.clock,
        )

    async def update(
        self,
        project_id: int,
        request: ProjectRequest,
        upload: Optional[ProjectUpload] = None,
        *,
        user_id: int,
    ) -> Project:
        return await projects.update(
            self.db,
            self.storage,
            project_id,
            request,
            upload,
            user_id=user_id,
            clock=self.clock,
        )

    async def delete(self, project_id: int, *, user_id: int) -> bool:
        return await projects.delete(self.db, self.storage, project_id, user_id=user_id)

    async def change_recruitment(
        self,
        project_id: int,
        recruitment: RecruitmentStatus,
        *,
        user_id: int,
    ) -> Project:
        return await projects.change_recruitment(
            self.db,
            project_id,
            recruitment,
            user_id=user_id,
            clock=self.clock,
        )

    async def mark_favorite(self, project_id: int, *, user_id: int) -> bool:
        return await projects.mark_favorite(self.db, project_id, user_id=user_id, clock=self.clock)

    async def unmark_favorite(self, project_id: int, *, user_id: int) -> bool:
        return await projects.unmark_favorite(self.db, project_id, user_id=user_id)


__all__ = ["ProjectFacade"]
# Fin del archivo backend/app/modules/projects/facades/project_facade.py
