# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend Colabora.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging centralizado (plain/json) configurado al importar.
- Middlewares de excepciones JSON y logging de requests.
- Ciclo de vida con cierre del pool HTTP compartido en shutdown.
- Health principal /health delegado al paquete app.routes (health_routes.py)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que use os.getenv
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"  # backend/.env
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _PYTHON_ENV == "development"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.settings import get_settings
from app.core.logging import setup_logging

_settings = get_settings()
setup_logging(level=_settings.log_level, fmt=_settings.log_format)
logger = logging.getLogger(__name__)

logger.info(f"[dotenv] Loaded {_ENV_PATH} (override={_override_env}, PYTHON_ENV={_PYTHON_ENV})")

# Registrar todos los modelos en Base.metadata
import app.modules.auth.models  # noqa: F401,E402
import app.modules.projects.models  # noqa: F401,E402
import app.modules.comments.models  # noqa: F401,E402

from app.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from app.shared.utils.connection_pool import close_connection_pool
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    logger.info("🟢 Backend de Colabora iniciado (env=%s).", _settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        await close_connection_pool()
        logger.info("🔴 Backend de Colabora apagado.")


openapi_tags = [
    {"name": "projects", "description": "Proyectos, reclutamiento y favoritos"},
    {"name": "comments", "description": "Comentarios de proyectos"},
    {"name": "health", "description": "Estado del servicio"},
]

app = FastAPI(
    title="Colabora API",
    description="API de Colabora: proyectos colaborativos y comentarios",
    version=_settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,  # Fuerza charset=utf-8 en todas las respuestas JSON
)


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS a partir de CORS_ORIGINS.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = _settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"] if is_wildcard_only else ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    if is_wildcard_only and _settings.is_prod:
        logger.warning("⚠️ CORS WILDCARD IN PRODUCTION: configura CORS_ORIGINS con orígenes explícitos.")

    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("🌐 CORS origins=%s credentials=%s", origins_list, cors_config["allow_credentials"])
    return cors_config


# El orden real de ejecución de middlewares en Starlette es inverso al registro:
# CORS se registra al final para ejecutarse primero (outermost).
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(JSONExceptionMiddleware)
_cors_config = _configure_cors(app)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Custom HTTPException handler that ensures UTF-8 charset on JSON responses.

    Fixes mojibake in error messages (acentos).
    """
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# Incluye router maestro
from app.routes import router as main_router  # noqa: E402

app.include_router(main_router)


@app.get("/")
async def root():
    return {"service": "Colabora Backend", "status": "active"}


if __name__ == "__main__":
    is_production = _settings.is_prod
    enable_reload = not is_production and os.getenv("DISABLE_RELOAD", "").lower() not in ("true", "1", "yes")

    logger.info(f"🔧 Starting server with reload={enable_reload} (production={is_production})")

    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=int(_settings.app_port),
        reload=enable_reload,
    )

# Fin del archivo backend/app/main.py
