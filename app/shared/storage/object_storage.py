# -*- coding: utf-8 -*-
"""
backend/app/shared/storage/object_storage.py

Object storage para archivos adjuntos de proyectos.

- ObjectStorageClient: contrato mínimo (upload → URL pública, delete por URL)
- SupabaseObjectStorage: implementación sobre SupabaseStorageHTTPClient
- get_object_storage: dependencia FastAPI (sobrescribible en tests)

Las keys tienen la forma ``projects/<uuid hex>/<nombre saneado>`` para que
dos archivos con el mismo nombre nunca colisionen.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
import os
import re
import unicodedata
import uuid
from typing import Callable, Optional, Protocol, runtime_checkable

from app.shared.config import settings
from app.shared.utils.http_storage_client import SupabaseStorageHTTPClient
from app.shared.utils.storage_errors import StorageRequestError

logger = logging.getLogger(__name__)

KEY_PREFIX = "projects"
DEFAULT_OBJECT_NAME = "archivo"
MAX_OBJECT_NAME_LENGTH = 120

_PROBLEMATIC_CHARS = re.compile(r'[\x00-\x1f\x7f/\\:*?"<>|#%+;,=\[\]{}^`~]')


@runtime_checkable
class ObjectStorageClient(Protocol):
    async def upload(self, data: bytes, *, filename: str, content_type: Optional[str] = None) -> str:
        ...

    async def delete(self, url: str) -> None:
        ...


def sanitize_object_name(filename: Optional[str]) -> str:
    """
    Sanea el nombre del archivo para usarlo como último segmento de la key.
    Translitera acentos a ASCII, reemplaza caracteres problemáticos y
    espacios por guiones, y limita la longitud preservando la extensión.
    """
    if not filename:
        return DEFAULT_OBJECT_NAME

    # Nombre base (navegadores antiguos envían la ruta completa)
    name = filename.replace("\\", "/").rsplit("/", 1)[-1].strip()
    name = unicodedata.normalize("NFD", name)
    name = "".join(ch for ch in name if unicodedata.category(ch) != "Mn")

    base, ext = os.path.splitext(name)
    base = _PROBLEMATIC_CHARS.sub("-", base)
    base = re.sub(r"\s+", "-", base)
    base = re.sub(r"[^\w.-]", "-", base)
    base = re.sub(r"-+", "-", base).strip("-.")
    ext = re.sub(r"[^\w.]", "", ext.lower())

    if not base:
        base = DEFAULT_OBJECT_NAME
    if len(base) + len(ext) > MAX_OBJECT_NAME_LENGTH:
        base = base[: max(1, MAX_OBJECT_NAME_LENGTH - len(ext))]
    return base + ext


def build_object_key(filename: Optional[str]) -> str:
    return f"{KEY_PREFIX}/{uuid.uuid4().hex}/{sanitize_object_name(filename)}"


class SupabaseObjectStorage:
    """
    Adaptador de ObjectStorageClient sobre Supabase Storage.

    Acepta un cliente HTTP ya construido o una factory. Con factory el
    cliente se crea en el primer upload/delete: las operaciones sin archivo
    no dependen de que haya credenciales configuradas.
    """

    def __init__(
        self,
        http_client: Optional[SupabaseStorageHTTPClient],
        bucket: str,
        *,
        http_factory: Optional[Callable[[], SupabaseStorageHTTPClient]] = None,
    ):
        if http_client is None and http_factory is None:
            raise ValueError("Se requiere http_client o http_factory")
        self._http = http_client
        self._http_factory = http_factory
        self.bucket = bucket

    def _client(self) -> SupabaseStorageHTTPClient:
        if self._http is None:
            try:
                self._http = self._http_factory()
            except RuntimeError as exc:
                raise StorageRequestError(0, "", self.bucket, "", message=str(exc)) from exc
        return self._http

    def key_from_url(self, url: str) -> str:
        """Obtiene la key del objeto a partir de su URL pública."""
        prefix = self._client().public_url(self.bucket, "")
        if not url or not url.startswith(prefix) or len(url) == len(prefix):
            raise StorageRequestError(
                0, url, self.bucket, "",
                message="La URL no pertenece al bucket configurado",
            )
        return url[len(prefix):]

    async def upload(self, data: bytes, *, filename: str, content_type: Optional[str] = None) -> str:
        http = self._client()
        key = build_object_key(filename)
        await http.upload_file(
            self.bucket,
            key,
            data,
            content_type=content_type or "application/octet-stream",
        )
        return http.public_url(self.bucket, key)

    async def delete(self, url: str) -> None:
        key = self.key_from_url(url)
        try:
            await self._client().delete_file(self.bucket, key)
        except FileNotFoundError:
            logger.info("Objeto ya inexistente en storage, nada que eliminar: %s", key)


def _http_client_from_settings() -> SupabaseStorageHTTPClient:
    key = settings.supabase_service_role_key
    return SupabaseStorageHTTPClient(
        str(settings.supabase_url or ""),
        key.get_secret_value() if key else "",
    )


def get_object_storage() -> ObjectStorageClient:
    """
    Dependencia FastAPI: storage configurado desde settings.
    Sin credenciales de Supabase, upload/delete fallan con StorageRequestError.
    """
    return SupabaseObjectStorage(
        None,
        settings.supabase_bucket_name,
        http_factory=_http_client_from_settings,
    )


__all__ = [
    "ObjectStorageClient",
    "SupabaseObjectStorage",
    "get_object_storage",
    "sanitize_object_name",
    "build_object_key",
]
# Fin del archivo backend/app/shared/storage/object_storage.py
