# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/favorites.py

Marcar / desmarcar un proyecto como favorito (idempotente).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""
from fastapi import APIRouter, Depends

from app.shared.utils.api_responses import CommonApiResponse
from app.modules.auth.dependencies import get_current_user_id
from app.modules.projects.services import ProjectsCommandService
from app.modules.projects.routes.deps import (
    PROJECT_DOMAIN_ERRORS,
    get_projects_command_service,
    http_error_from,
)

router = APIRouter(tags=["projects:favorites"])


@router.post(
    "/{project_id}/favorite",
    response_model=CommonApiResponse[bool],
    summary="Marcar proyecto como favorito",
)
async def mark_favorite(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        created = await svc.mark_favorite(project_id, user_id=user_id)
    except PROJECT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(created)


@router.delete(
    "/{project_id}/favorite",
    response_model=CommonApiResponse[bool],
    summary="Quitar proyecto de favoritos",
)
async def unmark_favorite(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    removed = await svc.unmark_favorite(project_id, user_id=user_id)
    return CommonApiResponse.success(removed)
