# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from .database import (
    engine,
    SessionLocal,
    get_db,
    session_scope,
    check_database_health,
    enable_sqlite_foreign_keys,
)
from .base import Base, NAMING_CONVENTION, str_enum

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "session_scope",
    "check_database_health",
    "enable_sqlite_foreign_keys",
    "Base",
    "NAMING_CONVENTION",
    "str_enum",
]
