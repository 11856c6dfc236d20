# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/__init__.py

Repositorios del módulo Auth.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .verification_code_repository import (
    get_verification_code,
    save_verification_code,
    delete_verification_code,
)

__all__ = [
    "get_verification_code",
    "save_verification_code",
    "delete_verification_code",
]

# Fin del archivo backend/app/modules/auth/repositories/__init__.py
