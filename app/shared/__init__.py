# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Componentes compartidos entre módulos: configuración, base de datos,
middlewares, storage de objetos y utilidades HTTP.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

from app.shared.config import get_settings

__all__ = ["get_settings"]
# fin del archivo
