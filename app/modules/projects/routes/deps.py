# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/deps.py

Dependencias inyectables y helpers HTTP de las rutas de Projects:
- servicios reales (tests sobreescriben get_db / get_object_storage)
- lectura del multipart (JSON `project` + archivo opcional)
- traducción de errores de dominio a HTTPException

Autor: Equipo Colabora
Ajustado: 2026-03-02
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, UploadFile
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database.database import get_db
from app.shared.storage import ObjectStorageClient, get_object_storage
from app.shared.utils.http_exceptions import (
    BadGatewayException,
    BadRequestException,
    ForbiddenException,
    NotFoundException,
    PayloadTooLargeException,
    UnprocessableEntityException,
)
from app.modules.projects.facades import (
    PermissionDenied,
    ProjectFileStorageError,
    ProjectNotFound,
    ProjectUpload,
)
from app.modules.projects.schemas import ProjectRequest
from app.modules.projects.services import (
    ProjectsCommandService,
    ProjectsQueryService,
)

logger = logging.getLogger(__name__)

PROJECT_DOMAIN_ERRORS = (ProjectNotFound, PermissionDenied, ProjectFileStorageError)


async def get_projects_command_service(
    db: AsyncSession = Depends(get_db),
    storage: ObjectStorageClient = Depends(get_object_storage),
) -> ProjectsCommandService:
    """
    Devuelve el servicio real para comandos de Projects.
    """
    return ProjectsCommandService(db, storage)


async def get_projects_query_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectsQueryService:
    """
    Devuelve el servicio real para consultas de Projects.
    """
    return ProjectsQueryService(db)


def parse_project_request(raw: str) -> ProjectRequest:
    """
    Valida el campo `project` (JSON) del multipart.
    JSON mal formado → 400; errores de validación → 422 con la lista de
    errores de Pydantic.
    """
    try:
        return ProjectRequest.model_validate_json(raw)
    except ValidationError as exc:
        if any(err["type"] == "json_invalid" for err in exc.errors()):
            raise BadRequestException(detail="El campo project no es JSON válido") from exc
        raise UnprocessableEntityException(
            detail=exc.errors(include_url=False, include_context=False, include_input=False)
        ) from exc


async def read_upload(file: Optional[UploadFile]) -> Optional[ProjectUpload]:
    """
    Lee el archivo del multipart.

    - Sin archivo, sin nombre o de 0 bytes → None ("sin archivo")
    - Más grande que MAX_FILE_SIZE_MB → 413, antes de tocar el storage
    """
    if file is None or not file.filename:
        return None

    limit = settings.max_file_size_bytes
    data = await file.read(limit + 1)
    if len(data) > limit:
        logger.info("project_upload_rejected filename=%s reason=too_large", file.filename)
        raise PayloadTooLargeException(
            detail=f"El archivo excede el máximo de {settings.max_file_size_mb} MB"
        )
    if not data:
        return None
    return ProjectUpload(filename=file.filename, content_type=file.content_type, data=data)


def http_error_from(exc: Exception) -> HTTPException:
    """Traduce errores de dominio de Projects a HTTPException."""
    if isinstance(exc, ProjectNotFound):
        return NotFoundException(detail="Proyecto no encontrado")
    if isinstance(exc, PermissionDenied):
        return ForbiddenException(detail="No eres el autor del proyecto")
    if isinstance(exc, ProjectFileStorageError):
        return BadGatewayException(detail="No se pudo guardar el archivo del proyecto")
    raise TypeError(f"Error de dominio no mapeado: {type(exc).__name__}")
# Fin del archivo backend/app/modules/projects/routes/deps.py
