# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/projects/__init__.py

Re-exporta operaciones de proyectos (CRUD, convocatoria, favoritos, archivos).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .crud import (
    build_recruits,
    create,
    update,
    delete,
    change_recruitment,
)
from .favorites import mark_favorite, unmark_favorite
from .files import ProjectUpload, store_upload, discard_quietly

__all__ = [
    # CRUD
    "build_recruits",
    "create",
    "update",
    "delete",
    "change_recruitment",

    # Favoritos
    "mark_favorite",
    "unmark_favorite",

    # Archivos
    "ProjectUpload",
    "store_upload",
    "discard_quietly",
]
