# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- validate_jwt_token: valida el token y devuelve el claim 'sub'
- get_current_user_id: dependencia FastAPI con oauth2_scheme (id numérico)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends

from app.shared.utils.http_exceptions import UnauthorizedException

from .security import oauth2_scheme, decode_access_token, TokenDecodeError

logger = logging.getLogger(__name__)


def _unauthorized(message: str) -> UnauthorizedException:
    return UnauthorizedException(detail={"error": "invalid_token", "message": message})


def validate_jwt_token(token: Optional[str]) -> str:
    """
    Valida un JWT y extrae el user_id (claim 'sub').

    Raises:
        UnauthorizedException (401): token ausente, inválido o expirado.
    """
    if not token:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(token)
    except TokenDecodeError as e:
        raise _unauthorized(str(e)) from e
    return str(payload["sub"])


async def get_current_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
) -> int:
    """
    Dependencia de autenticación para endpoints protegidos.

    Returns:
        int: id del usuario autenticado.
    """
    sub = validate_jwt_token(token)
    try:
        return int(sub)
    except ValueError as e:
        logger.info("JWT con 'sub' no numérico rechazado")
        raise _unauthorized("Token does not contain a valid user identifier") from e


__all__ = ["validate_jwt_token", "get_current_user_id"]
# Fin del archivo backend/app/modules/auth/dependencies.py
