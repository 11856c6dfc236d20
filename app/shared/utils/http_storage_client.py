# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_storage_client.py

Cliente HTTP para Supabase Storage usando httpx directamente.
- Usa el pool de conexiones compartido (o un cliente inyectado en tests)
- Traduce respuestas de error a StorageRequestError / FileNotFoundError

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

import logging
from typing import Any, Dict, Optional

import httpx

from app.shared.utils.connection_pool import get_pooled_client
from app.shared.utils.storage_errors import StorageRequestError

logger = logging.getLogger(__name__)


class SupabaseStorageHTTPClient:
    """
    Cliente HTTP mínimo para la API REST de Supabase Storage.

    Args:
        base_url: URL del proyecto Supabase (sin "/" final)
        service_role_key: clave de servicio para el header Authorization
        client: cliente httpx opcional; si no se pasa se usa el pool global
    """

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not base_url or not service_role_key:
            raise RuntimeError("Faltan variables de entorno para Supabase Storage")
        self.base_url = str(base_url).rstrip("/")
        self._service_role_key = service_role_key
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await get_pooled_client()

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._service_role_key}"}

    def object_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/{bucket}/{path}"

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    async def upload_file(
        self,
        bucket: str,
        path: str,
        file_data: bytes,
        content_type: str = "application/octet-stream",
    ) -> Dict[str, Any]:
        """
        Sube un objeto al bucket.

        Raises:
            StorageRequestError: si Supabase responde con error o falla la conexión
        """
        url = self.object_url(bucket, path)
        headers = {**self._auth_headers(), "Content-Type": content_type}

        client = await self._get_client()
        try:
            response = await client.post(url, headers=headers, content=file_data)
        except httpx.RequestError as e:
            logger.error("Error de conexión al subir archivo %s: %s", path, e)
            raise StorageRequestError(0, url, bucket, path, message=f"Error de conexión: {e}") from e

        if response.status_code not in (200, 201):
            logger.error("Error al subir archivo %s: HTTP %s", path, response.status_code)
            raise StorageRequestError(response.status_code, url, bucket, path, response.text)

        logger.info("Archivo subido correctamente: %s", path)
        return response.json() if response.content else {}

    async def delete_file(self, bucket: str, path: str) -> bool:
        """
        Elimina un objeto del bucket.

        Raises:
            FileNotFoundError: si el objeto no existe (404)
            StorageRequestError: cualquier otro error
        """
        url = self.object_url(bucket, path)
        client = await self._get_client()
        try:
            response = await client.delete(url, headers=self._auth_headers())
        except httpx.RequestError as e:
            logger.error("Error de conexión al eliminar archivo %s: %s", path, e)
            raise StorageRequestError(0, url, bucket, path, message=f"Error de conexión: {e}") from e

        if response.status_code == 404:
            raise FileNotFoundError(f"El archivo '{path}' no existe en el bucket '{bucket}'")
        if response.status_code not in (200, 204):
            logger.error("Error al eliminar archivo %s: HTTP %s", path, response.status_code)
            raise StorageRequestError(response.status_code, url, bucket, path, response.text)

        logger.info("Archivo eliminado: %s", path)
        return True


__all__ = ["SupabaseStorageHTTPClient"]
