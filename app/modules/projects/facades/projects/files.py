# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/projects/files.py

Coordinación del archivo adjunto de un proyecto con el object storage.

- store_upload: sube y devuelve la URL; un fallo aborta la operación
- discard_quietly: borra sin propagar errores (objeto huérfano → warning)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.shared.storage import ObjectStorageClient
from app.shared.utils.storage_errors import StorageRequestError
from app.modules.projects.facades.errors import ProjectFileStorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectUpload:
    """Archivo recibido en el multipart (ya leído y validado en tamaño)."""
    filename: str
    content_type: Optional[str]
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


async def store_upload(storage: ObjectStorageClient, upload: ProjectUpload) -> str:
    """
    Sube el archivo y devuelve su URL pública.

    Raises:
        ProjectFileStorageError: si el storage falla
    """
    try:
        url = await storage.upload(upload.data, filename=upload.filename, content_type=upload.content_type)
    except StorageRequestError as exc:
        logger.error("project_file_upload_failed filename=%s error=%s", upload.filename, exc)
        raise ProjectFileStorageError(f"No se pudo guardar el archivo: {exc}") from exc

    logger.info("project_file_uploaded filename=%s size=%s", upload.filename, upload.size)
    return url


async def discard_quietly(storage: ObjectStorageClient, url: str, *, reason: str) -> bool:
    """
    Elimina un objeto del storage. Devuelve False si falló (queda huérfano).
    """
    if not url:
        return True
    try:
        await storage.delete(url)
    except (StorageRequestError, FileNotFoundError) as exc:
        logger.warning("project_file_orphaned reason=%s url=%s error=%s", reason, url, exc)
        return False

    logger.info("project_file_deleted reason=%s url=%s", reason, url)
    return True


__all__ = ["ProjectUpload", "store_upload", "discard_quietly"]
