# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro de la API pública de Colabora (rutas sin prefijo):
  - /projects/...  (módulo projects)
  - /comments/...  (módulo comments)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.projects.routes import get_projects_router
from app.modules.comments.routes import get_comments_router

logger = logging.getLogger(__name__)

public = APIRouter(prefix="")  # sin prefijo

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.info(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


_include(public, get_projects_router(), "projects")
_include(public, get_comments_router(), "comments")


def loaded_routers() -> list[str]:
    """Routers montados (para diagnóstico)."""
    return list(_loaded)


__all__ = ["public", "loaded_routers"]
# Fin del archivo backend/app/routes/master_routes.py
