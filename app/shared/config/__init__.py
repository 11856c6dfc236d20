# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings

`settings` es un proxy perezoso sobre config_loader.get_settings(): no
instancia nada al importar, así los tests pueden fijar PYTHON_ENV y
variables de entorno antes del primer acceso.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import Any, Callable

from .config_loader import get_settings
from .settings_base import BaseAppSettings


class _SettingsProxy:
    __slots__ = ("_getter",)

    def __init__(self, getter: Callable[[], BaseAppSettings]) -> None:
        object.__setattr__(self, "_getter", getter)

    def __getattr__(self, name: str) -> Any:
        return getattr(object.__getattribute__(self, "_getter")(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(object.__getattribute__(self, "_getter")(), name, value)


# Singleton accesible como `settings`
settings = _SettingsProxy(get_settings)

__all__ = ["settings", "get_settings", "BaseAppSettings"]
