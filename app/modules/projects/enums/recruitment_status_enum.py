# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/recruitment_status_enum.py

Estado de reclutamiento de un proyecto.
Se persiste como VARCHAR (ver str_enum) para ser portable entre PostgreSQL y SQLite.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from enum import StrEnum


class RecruitmentStatus(StrEnum):
    """
    - OPEN: el proyecto acepta postulantes (estado inicial)
    - CLOSED: el dueño cerró la convocatoria
    """
    __db_enum_name__ = "recruitment_status"

    OPEN = "OPEN"
    CLOSED = "CLOSED"


__all__ = ["RecruitmentStatus"]
