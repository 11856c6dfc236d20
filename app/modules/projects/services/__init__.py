# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/__init__.py

Servicios de aplicación del módulo Projects.

Capa de orquestación (application layer) sobre las facades:
- ProjectsCommandService : comandos/mutaciones (create/update/delete/recruitment/favoritos)
- ProjectsQueryService   : lecturas/consultas (listados, hot, detalle)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .commands import (
    ProjectsCommandService,
    MSG_PROJECT_SAVED,
    MSG_PROJECT_UPDATED,
    MSG_PROJECT_DELETED,
)
from .queries import ProjectsQueryService

__all__ = [
    "ProjectsCommandService",
    "ProjectsQueryService",
    "MSG_PROJECT_SAVED",
    "MSG_PROJECT_UPDATED",
    "MSG_PROJECT_DELETED",
]

# Fin del archivo backend/app/modules/projects/services/__init__.py
