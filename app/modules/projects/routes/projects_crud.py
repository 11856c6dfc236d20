# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/projects_crud.py

Rutas CRUD de Proyectos:
- Crear (multipart: `project` JSON + `file` opcional)
- Obtener detalle por ID (incrementa vistas)
- Actualizar (PUT o PATCH, multipart como en crear)
- Eliminar
- Abrir / cerrar convocatoria

Autor: Equipo Colabora
Fecha de actualización: 2026-03-02
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.shared.utils.api_responses import CommonApiResponse
from app.shared.utils.http_exceptions import NotFoundException
from app.modules.auth.dependencies import get_current_user_id
from app.modules.projects.services import ProjectsCommandService, ProjectsQueryService
from app.modules.projects.schemas import ProjectDetail, RecruitmentChangeIn
from app.modules.projects.routes.deps import (
    PROJECT_DOMAIN_ERRORS,
    get_projects_command_service,
    get_projects_query_service,
    http_error_from,
    parse_project_request,
    read_upload,
)

router = APIRouter(tags=["projects:crud"])


@router.post(
    "",
    response_model=CommonApiResponse[str],
    status_code=status.HTTP_201_CREATED,
    summary="Crear proyecto",
)
async def create_project(
    project: str = Form(..., description="ProjectRequest serializado en JSON"),
    file: Optional[UploadFile] = File(None),
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Crea un proyecto para el usuario autenticado. El archivo es opcional.
    """
    request = parse_project_request(project)
    upload = await read_upload(file)
    try:
        message = await svc.create_project(request, upload, user_id=user_id)
    except PROJECT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)


@router.get(
    "/{project_id}",
    response_model=CommonApiResponse[ProjectDetail],
    summary="Detalle de proyecto (incrementa vistas)",
)
async def get_project_detail(
    project_id: int,
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    detail = await q.find_by_id(project_id)
    if detail is None:
        raise NotFoundException(detail="Proyecto no encontrado")
    return CommonApiResponse.success(detail)


@router.api_route(
    "/{project_id}",
    methods=["PUT", "PATCH"],
    response_model=CommonApiResponse[str],
    summary="Actualizar proyecto (reemplaza campos y recruits)",
)
async def update_project(
    project_id: int,
    project: str = Form(..., description="ProjectRequest serializado en JSON"),
    file: Optional[UploadFile] = File(None),
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Actualiza un proyecto propio. Sin archivo nuevo se conserva el actual.
    """
    request = parse_project_request(project)
    upload = await read_upload(file)
    try:
        message = await svc.update_project(project_id, request, upload, user_id=user_id)
    except PROJECT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)


@router.delete(
    "/{project_id}",
    response_model=CommonApiResponse[str],
    summary="Eliminar proyecto propio",
)
async def delete_project(
    project_id: int,
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        message = await svc.delete_project(project_id, user_id=user_id)
    except PROJECT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)


@router.patch(
    "/{project_id}/recruitment",
    response_model=CommonApiResponse[str],
    summary="Abrir o cerrar la convocatoria",
)
async def change_recruitment(
    project_id: int,
    payload: RecruitmentChangeIn,
    user_id: int = Depends(get_current_user_id),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    try:
        project = await svc.change_recruitment(project_id, payload.recruitment, user_id=user_id)
    except PROJECT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(str(project.recruitment))

# Fin del archivo backend/app/modules/projects/routes/projects_crud.py
