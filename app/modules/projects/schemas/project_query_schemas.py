# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/project_query_schemas.py

Schemas Pydantic para filtros de búsqueda de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from typing import Optional
from pydantic import Field, ConfigDict

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.projects.enums import RecruitmentStatus


class ProjectSearchParams(UTF8SafeModel):
    """
    Filtros opcionales del listado general. Los filtros vacíos se ignoran.
    """
    keyword: Optional[str] = Field(None, max_length=100, description="Busca en título y descripción")
    position: Optional[str] = Field(None, max_length=100, description="Rol buscado (contiene)")
    tech_stack: Optional[str] = Field(None, max_length=100, description="Tecnología (contiene)")
    recruitment: Optional[RecruitmentStatus] = Field(None, description="OPEN / CLOSED")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "keyword": "voluntariado",
                "position": "Backend",
                "tech_stack": "Python",
                "recruitment": "OPEN",
            }
        }
    )


__all__ = ["ProjectSearchParams"]
