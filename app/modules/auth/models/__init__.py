# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/__init__.py

Modelos ORM del módulo de autenticación.
El usuario es externo (referenciado por id); aquí solo vive VerificationCode.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .verification_code_models import VerificationCode

__all__ = ["VerificationCode"]
