# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración para Colabora.
Reexpone la carga de settings basada en Pydantic v2 definida en
`app.shared.config`.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    return _get_settings()

# Fin del archivo backend/app/core/settings.py
