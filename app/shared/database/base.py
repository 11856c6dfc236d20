# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- str_enum: helper para mapear enums Python (str) a columnas portables

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de Colabora.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER GENÉRICO PARA ENUMS =====
def str_enum(enum_cls: Type[Enum], name: str | None = None, length: int = 16) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy que persiste el *valor* del enum
    como VARCHAR (sin tipo nativo), válido tanto en PostgreSQL como en SQLite.

    Uso típico:

        recruitment = Column(str_enum(RecruitmentStatus), nullable=False)
    """
    enum_name = name or getattr(enum_cls, "__db_enum_name__", enum_cls.__name__.lower())

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        length=length,
        validate_strings=True,
        values_callable=_values,
    )


__all__ = ["Base", "NAMING_CONVENTION", "str_enum"]

# Fin del archivo backend/app/shared/database/base.py
