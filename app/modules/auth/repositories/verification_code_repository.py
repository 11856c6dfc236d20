# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/verification_code_repository.py

Acceso a datos de VerificationCode.
Los emails se normalizan (strip + minúsculas) antes de cualquier consulta.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models.verification_code_models import VerificationCode


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_verification_code(db: AsyncSession, email: str) -> Optional[VerificationCode]:
    stmt = select(VerificationCode).where(VerificationCode.email == normalize_email(email))
    return (await db.execute(stmt)).scalar_one_or_none()


async def save_verification_code(db: AsyncSession, email: str, code: str) -> VerificationCode:
    """
    Inserta o reemplaza el código del email y confirma la transacción.
    """
    existing = await get_verification_code(db, email)
    now = datetime.now(timezone.utc)
    if existing is None:
        existing = VerificationCode(email=normalize_email(email), verification_code=code, created_at=now)
        db.add(existing)
    else:
        existing.verification_code = code
        existing.created_at = now
    await db.commit()
    return existing


async def delete_verification_code(db: AsyncSession, email: str) -> bool:
    """Elimina el código del email. Devuelve True si existía."""
    stmt = delete(VerificationCode).where(VerificationCode.email == normalize_email(email))
    res = await db.execute(stmt)
    await db.commit()
    return bool(res.rowcount)


__all__ = [
    "normalize_email",
    "get_verification_code",
    "save_verification_code",
    "delete_verification_code",
]
