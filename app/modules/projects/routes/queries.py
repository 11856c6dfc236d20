# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/queries.py

Rutas de solo lectura: listado general con filtros, hot, favoritos y
proyectos propios. Cada elemento incluye el flag `recent`.

Autor: Equipo Colabora
Fecha de actualización: 2026-03-02
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.shared.utils.api_responses import CommonApiResponse, PageApiResponse
from app.modules.auth.dependencies import get_current_user_id
from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.services import ProjectsQueryService
from app.modules.projects.routes.deps import get_projects_query_service
from app.modules.projects.schemas import ProjectListItem, ProjectSearchParams

router = APIRouter(tags=["projects:queries"])


# ---------------------------------------------------------------------------
# Listado general
# ---------------------------------------------------------------------------
@router.get(
    "",
    response_model=PageApiResponse[ProjectListItem],
    summary="Listar proyectos (filtros opcionales)",
)
async def list_projects(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    keyword: Optional[str] = Query(None, max_length=100),
    position: Optional[str] = Query(None, max_length=100),
    tech_stack: Optional[str] = Query(None, max_length=100),
    recruitment: Optional[RecruitmentStatus] = Query(None),
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    search = ProjectSearchParams(
        keyword=keyword,
        position=position,
        tech_stack=tech_stack,
        recruitment=recruitment,
    )
    return await q.find_list(search, page=page, size=size)


# ---------------------------------------------------------------------------
# Hot
# ---------------------------------------------------------------------------
@router.get(
    "/hot",
    response_model=CommonApiResponse[List[ProjectListItem]],
    summary="Proyectos abiertos más vistos",
)
async def list_hot_projects(
    size: Optional[int] = Query(None, ge=1),
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    return CommonApiResponse.success(await q.find_hot_list(size))


# ---------------------------------------------------------------------------
# Favoritos / propios del usuario autenticado
# ---------------------------------------------------------------------------
@router.get(
    "/favorites",
    response_model=PageApiResponse[ProjectListItem],
    summary="Proyectos marcados como favoritos",
)
async def list_favorite_projects(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    user_id: int = Depends(get_current_user_id),
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    return await q.find_favorite_list(user_id, page=page, size=size)


@router.get(
    "/mine",
    response_model=PageApiResponse[ProjectListItem],
    summary="Proyectos publicados por el usuario",
)
async def list_my_projects(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    user_id: int = Depends(get_current_user_id),
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    return await q.find_my_list(user_id, page=page, size=size)

# Fin del archivo backend/app/modules/projects/routes/queries.py
