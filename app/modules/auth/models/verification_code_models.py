# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/verification_code_models.py

Modelo ORM para códigos de verificación de correo.
Un registro por email (el último código emitido reemplaza al anterior).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class VerificationCode(Base):
    __tablename__ = "verification_codes"

    # Email normalizado en minúsculas
    email: Mapped[str] = mapped_column(String(320), primary_key=True)

    verification_code: Mapped[str] = mapped_column(String(16), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<VerificationCode email={self.email!r}>"


__all__ = ["VerificationCode"]
