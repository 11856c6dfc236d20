# -*- coding: utf-8 -*-
"""
backend/app/shared/storage/__init__.py

Object storage de archivos adjuntos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .object_storage import (
    ObjectStorageClient,
    SupabaseObjectStorage,
    build_object_key,
    get_object_storage,
    sanitize_object_name,
)
from .inmemory import InMemoryObjectStorage

__all__ = [
    "ObjectStorageClient",
    "SupabaseObjectStorage",
    "build_object_key",
    "get_object_storage",
    "sanitize_object_name",
    "InMemoryObjectStorage",
]
