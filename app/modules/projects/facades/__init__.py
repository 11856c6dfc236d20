# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/__init__.py

Re-exporta facades del módulo projects para facilitar imports.
Mantiene API pública estable mientras organiza código interno por responsabilidad.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .errors import (
    ProjectNotFound,
    PermissionDenied,
    ProjectFileStorageError,
)
from .base import now_utc, is_owner
from .recent import is_recent
from .projects import ProjectUpload, build_recruits
from .project_facade import ProjectFacade
from .project_query_facade import ProjectQueryFacade

__all__ = [
    # Errors
    "ProjectNotFound",
    "PermissionDenied",
    "ProjectFileStorageError",

    # Helpers
    "now_utc",
    "is_owner",
    "is_recent",
    "build_recruits",
    "ProjectUpload",

    # Facades
    "ProjectFacade",
    "ProjectQueryFacade",
]

# Fin del archivo backend/app/modules/projects/facades/__init__.py
