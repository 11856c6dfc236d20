# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/queries.py

Capa de aplicación (lecturas/consultas) del módulo Projects.
Orquesta ProjectQueryFacade y aplica los límites de paginación de settings.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.utils.api_responses import PageApiResponse
from app.shared.utils.pagination import PageRequest
from app.modules.projects.facades import ProjectQueryFacade, now_utc
from app.modules.projects.facades.base import Clock
from app.modules.projects.schemas import ProjectDetail, ProjectListItem, ProjectSearchParams


class ProjectsQueryService:
    """Consultas de proyectos. Async."""

    def __init__(self, db: AsyncSession, clock: Clock = now_utc):
        self.db = db
        self.facade = ProjectQueryFacade(
            db,
            clock=clock,
            recent_window=dt.timedelta(hours=settings.recent_window_hours),
        )

    @staticmethod
    def page_request(page: int = 0, size: Optional[int] = None) -> PageRequest:
        return PageRequest.of(
            page,
            size,
            default_size=settings.page_size_default,
            max_size=settings.page_size_max,
        )

    # ---- Listados ----
    async def find_list(
        self,
        search: Optional[ProjectSearchParams] = None,
        *,
        page: int = 0,
        size: Optional[int] = None,
    ) -> PageApiResponse[ProjectListItem]:
        return await self.facade.find_list(search, self.page_request(page, size))

    async def find_my_list(self, user_id: int, *, page: int = 0, size: Optional[int] = None):
        return await self.facade.find_my_list(user_id, self.page_request(page, size))

    async def find_favorite_list(self, user_id: int, *, page: int = 0, size: Optional[int] = None):
        return await self.facade.find_favorite_list(user_id, self.page_request(page, size))

    async def find_hot_list(self, size: Optional[int] = None) -> List[ProjectListItem]:
        effective = size or settings.hot_list_size
        return await self.facade.find_hot_list(max(1, min(effective, settings.page_size_max)))

    # ---- Detalle ----
    async def find_by_id(self, project_id: int) -> Optional[ProjectDetail]:
        return await self.facade.find_by_id(project_id)
# Fin del archivo backend/app/modules/projects/services/queries.py
