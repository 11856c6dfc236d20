# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API de Colabora.

Responsabilidades:
- Incluir el router de health (/health).
- Incluir la capa pública definida en master_routes.py.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from .master_routes import public

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)

router.include_router(public)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
