# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del backend de Colabora.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.settings import get_settings
from app.core.db import check_database_health

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado básico del backend con verificación de conectividad a la base de datos.",
)
async def health_check() -> dict:
    """
    Returns:
        dict: información mínima de estado de la aplicación.
    """
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
