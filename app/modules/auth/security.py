# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/security.py

Módulo de seguridad para Auth en Colabora:
- Esquema OAuth2 (Bearer)
- Creación / decodificación de JWT

La emisión de tokens (login) vive en el servicio de usuarios; aquí solo se
firman tokens para pruebas/herramientas y se validan los entrantes.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from app.shared.config import settings

# -----------------------------------------------------------------------------
# Esquema OAuth2 para extraer el token de Authorization: Bearer <token>
# auto_error=False: la dependencia responde 401 con formato propio.
# -----------------------------------------------------------------------------
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


def _secret() -> str:
    return settings.jwt_secret_key.get_secret_value()


def create_access_token(
    subject: Union[str, int],
    expires_delta: Optional[timedelta] = None,
    **extra: Any,
) -> str:
    """
    Crea un JWT con claim 'sub' y metadatos opcionales en `extra`.
    Por convención, `sub` es el id numérico del usuario.
    """
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: Dict[str, Any] = {"sub": str(subject), "iat": int(now.timestamp()), "exp": int(expire.timestamp())}
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, _secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida un JWT. Lanza TokenDecodeError si es inválido/expirado.
    """
    try:
        payload = jwt.decode(token, _secret(), algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise TokenDecodeError("Token inválido o expirado") from e

    sub = payload.get("sub")
    if sub is None or not str(sub).strip():
        raise TokenDecodeError("Token sin 'sub'")
    return payload


__all__ = ["oauth2_scheme", "TokenDecodeError", "create_access_token", "decode_access_token"]
# Fin del archivo backend/app/modules/auth/security.py
