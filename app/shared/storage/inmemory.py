# -*- coding: utf-8 -*-
"""
backend/app/shared/storage/inmemory.py

Implementación en memoria de ObjectStorageClient para tests.

Registra subidas y borrados, y permite forzar el fallo de la siguiente
subida o del siguiente borrado.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import Dict, List, Optional

from app.shared.storage.object_storage import build_object_key
from app.shared.utils.storage_errors import StorageRequestError

BASE_URL = "https://storage.test/storage/v1/object/public/project-files/"


class InMemoryObjectStorage:
    def __init__(self) -> None:
        self.objects: Dict[str, bytes] = {}
        self.uploads: List[str] = []
        self.deletes: List[str] = []
        self.fail_next_upload = False
        self.fail_next_delete = False

    async def upload(self, data: bytes, *, filename: str, content_type: Optional[str] = None) -> str:
        if self.fail_next_upload:
            self.fail_next_upload = False
            raise StorageRequestError(503, BASE_URL, "project-files", filename, message="upload fallido (simulado)")
        url = BASE_URL + build_object_key(filename)
        self.objects[url] = data
        self.uploads.append(url)
        return url

    async def delete(self, url: str) -> None:
        if self.fail_next_delete:
            self.fail_next_delete = False
            raise StorageRequestError(503, url, "project-files", url, message="delete fallido (simulado)")
        self.objects.pop(url, None)
        self.deletes.append(url)

    def has(self, url: str) -> bool:
        return url in self.objects


__all__ = ["InMemoryObjectStorage"]
