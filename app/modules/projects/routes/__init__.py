# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/__init__.py

Router principal del módulo Projects.
Compone subrouters de:
- queries (listado, hot, favoritos, propios)
- projects_crud (crear, detalle, actualizar, eliminar, convocatoria)
- favorites (marcar / desmarcar)

Autor: Equipo Colabora
Fecha de actualización: 2026-03-02
"""
from fastapi import APIRouter

from .queries import router as queries_router
from .projects_crud import router as projects_crud_router
from .favorites import router as favorites_router

PREFIX = "/projects"


def get_projects_router() -> APIRouter:
    """
    Devuelve el router principal del módulo de proyectos con prefijo /projects.

    Orden de ensamblado:
      1. Consultas (/hot, /favorites, /mine) antes que /{project_id}
      2. CRUD principal (/{project_id})
      3. Favoritos (/{project_id}/favorite)
    """
    router = APIRouter(responses={404: {"description": "No encontrado"}})

    # El prefijo va en include_router: los listados usan path "" (/projects sin "/" final)
    router.include_router(queries_router, prefix=PREFIX, tags=["projects"])
    router.include_router(projects_crud_router, prefix=PREFIX, tags=["projects"])
    router.include_router(favorites_router, prefix=PREFIX, tags=["projects"])

    return router


# Fin del archivo backend/app/modules/projects/routes/__init__.py
