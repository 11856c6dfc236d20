# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/__init__.py

Schemas Pydantic del módulo de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .project_schemas import (
    RecruitRequest,
    ProjectRequest,
    RecruitmentChangeIn,
    RecruitRead,
    ProjectListItem,
    ProjectDetail,
)
from .project_query_schemas import ProjectSearchParams

__all__ = [
    "RecruitRequest",
    "ProjectRequest",
    "RecruitmentChangeIn",
    "RecruitRead",
    "ProjectListItem",
    "ProjectDetail",
    "ProjectSearchParams",
]
