# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/project_query_facade.py

Facade público para consultas y listados de proyectos.

- Todos los listados se devuelven como ProjectListItem con el flag `recent`
  calculado contra el reloj inyectado.
- find_by_id incrementa el contador de vistas (commit propio) y luego lee
  el detalle.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.utils.api_responses import PageApiResponse
from app.shared.utils.pagination import PageRequest, total_pages
from app.modules.projects.models import Project
from app.modules.projects.repositories import project_repository
from app.modules.projects.schemas import ProjectDetail, ProjectListItem, ProjectSearchParams

from .base import Clock, now_utc
from .recent import DEFAULT_RECENT_WINDOW, is_recent

logger = logging.getLogger(__name__)


class ProjectQueryFacade:
    """
    Facade público para consultas de solo lectura sobre proyectos
    (más el contador de vistas del detalle).
    """

    def __init__(
        self,
        db: AsyncSession,
        clock: Clock = now_utc,
        recent_window: dt.timedelta = DEFAULT_RECENT_WINDOW,
    ):
        self.db = db
        self.clock = clock
        self.recent_window = recent_window

    # ===== ANOTACIÓN =====

    def annotate(self, projects: Iterable[Project]) -> List[ProjectListItem]:
        """Convierte a ProjectListItem y marca `recent` con un único `now`."""
        now = self.clock()
        items = []
        for project in projects:
            item = ProjectListItem.model_validate(project)
            item.recent = is_recent(project.created_at, now, self.recent_window)
            items.append(item)
        return items

    def _page(self, projects: List[Project], total: int, page: PageRequest) -> PageApiResponse[ProjectListItem]:
        return PageApiResponse[ProjectListItem](
            data=self.annotate(projects),
            total_pages=total_pages(total, page.size),
            total_elements=total,
        )

    # ===== LISTADOS =====

    async def find_list(
        self,
        search: Optional[ProjectSearchParams],
        page: PageRequest,
    ) -> PageApiResponse[ProjectListItem]:
        items, total = await project_repository.search_projects(
            self.db, search, offset=page.offset, limit=page.size
        )
        return self._page(items, total, page)

    async def find_my_list(self, user_id: int, page: PageRequest) -> PageApiResponse[ProjectListItem]:
        items, total = await project_repository.list_projects_by_user(
            self.db, user_id, offset=page.offset, limit=page.size
        )
        return self._page(items, total, page)

    async def find_favorite_list(self, user_id: int, page: PageRequest) -> PageApiResponse[ProjectListItem]:
        items, total = await project_repository.list_favorite_projects(
            self.db, user_id, offset=page.offset, limit=page.size
        )
        return self._page(items, total, page)

    async def find_hot_list(self, size: int) -> List[ProjectListItem]:
        return self.annotate(await project_repository.list_hot_projects(self.db, size))

    # ===== DETALLE =====

    async def find_by_id(self, project_id: int) -> Optional[ProjectDetail]:
        """
        Incrementa view_count (sentencia y commit propios) y luego lee el detalle.
        Devuelve None si el proyecto no existe; el contador se intenta igual.
        """
        updated = await project_repository.increment_view_count(self.db, project_id)
        await self.db.commit()

        found = await project_repository.get_project_detail(self.db, project_id)
        if found is None:
            logger.debug("project_detail_miss project_id=%s view_rows=%s", project_id, updated)
            return None

        project, favorite_count = found
        detail = ProjectDetail.model_validate(project)
        detail.favorite_count = favorite_count
        return detail


__all__ = ["ProjectQueryFacade"]
# Fin del archivo backend/app/modules/projects/facades/project_query_facade.py
