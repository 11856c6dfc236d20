# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/routes/comments_routes.py

Rutas de comentarios de un proyecto:
- POST   /comments/{project_id}  cuerpo de texto plano
- GET    /comments/{project_id}  slice paginado (page, size)
- PATCH  /comments/{project_id}  {"commentId", "content"}
- DELETE /comments/{project_id}?commentId=...

Autor: Equipo Colabora
Fecha: 2026-03-02
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.shared.utils.api_responses import CommonApiResponse, SliceApiResponse
from app.shared.utils.http_exceptions import UnprocessableEntityException
from app.modules.auth.dependencies import get_current_user_id
from app.modules.comments.schemas import CommentRead, CommentRequest
from app.modules.comments.services import CommentService
from app.modules.comments.routes.deps import (
    COMMENT_DOMAIN_ERRORS,
    get_comment_service,
    http_error_from,
)

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post(
    "/{project_id}",
    response_model=CommonApiResponse[str],
    status_code=status.HTTP_201_CREATED,
    summary="Publicar comentario (texto plano)",
)
async def post_comment(
    project_id: int,
    request: Request,
    user_id: int = Depends(get_current_user_id),
    svc: CommentService = Depends(get_comment_service),
):
    raw = await request.body()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnprocessableEntityException(detail="El comentario debe ser texto UTF-8") from exc

    try:
        message = await svc.post_comment(project_id, content, user_id=user_id)
    except COMMENT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)


@router.get(
    "/{project_id}",
    response_model=SliceApiResponse[CommentRead],
    summary="Listar comentarios (más antiguos primero)",
)
async def get_comments(
    project_id: int,
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    svc: CommentService = Depends(get_comment_service),
):
    return await svc.get_comments(project_id, page=page, size=size)


@router.patch(
    "/{project_id}",
    response_model=CommonApiResponse[str],
    summary="Editar comentario propio",
)
async def update_comment(
    project_id: int,
    payload: CommentRequest,
    user_id: int = Depends(get_current_user_id),
    svc: CommentService = Depends(get_comment_service),
):
    try:
        message = await svc.update_comment(project_id, payload, user_id=user_id)
    except COMMENT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)


@router.delete(
    "/{project_id}",
    response_model=CommonApiResponse[str],
    summary="Eliminar comentario propio",
)
async def delete_comment(
    project_id: int,
    comment_id: int = Query(..., alias="commentId"),
    user_id: int = Depends(get_current_user_id),
    svc: CommentService = Depends(get_comment_service),
):
    try:
        message = await svc.delete_comment(project_id, comment_id, user_id=user_id)
    except COMMENT_DOMAIN_ERRORS as exc:
        raise http_error_from(exc) from exc
    return CommonApiResponse.success(message)

# Fin del archivo backend/app/modules/comments/routes/comments_routes.py
