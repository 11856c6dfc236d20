# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Auth package public API:
- dependencies (get_current_user_id, validate_jwt_token)
- modelos (VerificationCode)
"""

from .dependencies import get_current_user_id, validate_jwt_token
from .models import VerificationCode

__all__ = [
    "get_current_user_id",
    "validate_jwt_token",
    "VerificationCode",
]
# Fin del archivo backend/app/modules/auth/__init__.py
