# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/project_schemas.py

Schemas Pydantic para creación, actualización y respuesta de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from typing import Optional, List
from datetime import datetime
from pydantic import Field, field_validator, model_validator, ConfigDict

from app.shared.utils.base_models import UTF8SafeModel
from app.modules.projects.enums import RecruitmentStatus


# ========== REQUEST SCHEMAS ==========

class RecruitRequest(UTF8SafeModel):
    """Rol solicitado: posición y cupos (cubiertos / objetivo)."""
    position: str = Field(..., min_length=1, max_length=100, description="Rol buscado (p. ej. Backend)")
    current_count: int = Field(0, ge=0, description="Cupos ya cubiertos")
    target_count: int = Field(..., ge=0, description="Cupos totales buscados")

    @model_validator(mode="after")
    def counts_in_range(self) -> "RecruitRequest":
        if self.current_count > self.target_count:
            raise ValueError("current_count no puede ser mayor que target_count")
        return self


class ProjectRequest(UTF8SafeModel):
    """
    Request para crear o actualizar un proyecto.

    Llega como campo `project` (JSON) dentro del multipart, junto al archivo
    opcional. En update reemplaza todos los campos mutables y la lista
    completa de recruits.
    """
    title: str = Field(..., min_length=1, max_length=255, description="Título del proyecto")
    deadline: Optional[datetime] = Field(None, description="Fecha límite de la convocatoria")
    soft_skill: Optional[str] = Field(None, description="Habilidades blandas buscadas")
    important_question: Optional[str] = Field(None, description="Pregunta clave para postulantes")
    tech_stack: Optional[str] = Field(None, max_length=512, description="Tecnologías (separadas por coma)")
    description: Optional[str] = Field(None, description="Descripción libre")
    recruits: List[RecruitRequest] = Field(default_factory=list, description="Roles buscados, en orden")

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El título del proyecto no puede estar vacío")
        return v.strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "App de voluntariado",
                "deadline": "2026-04-30T23:59:59Z",
                "soft_skill": "Comunicación",
                "important_question": "¿Cuántas horas por semana puedes dedicar?",
                "tech_stack": "Python, FastAPI, React",
                "description": "Plataforma para coordinar voluntarios",
                "recruits": [
                    {"position": "Backend", "current_count": 0, "target_count": 2},
                    {"position": "Frontend", "current_count": 0, "target_count": 1},
                ],
            }
        }
    )


class RecruitmentChangeIn(UTF8SafeModel):
    """Request para abrir/cerrar la convocatoria."""
    recruitment: RecruitmentStatus


# ========== RESPONSE SCHEMAS ==========

class RecruitRead(UTF8SafeModel):
    recruit_id: int
    position: str
    current_count: int
    target_count: int


class ProjectSummaryBase(UTF8SafeModel):
    """Campos comunes de listados y detalle."""
    project_id: int = Field(..., description="ID del proyecto")
    user_id: int = Field(..., description="ID del usuario dueño")
    title: str
    file_url: str = Field("", description="URL del archivo adjunto ('' si no hay)")
    deadline: Optional[datetime] = None
    tech_stack: Optional[str] = None
    position: str = Field("", description="Resumen de roles buscados")
    recruitment: RecruitmentStatus
    view_count: int = 0
    created_at: datetime


class ProjectListItem(ProjectSummaryBase):
    """Elemento de listado; `recent` se calcula en cada lectura."""
    recent: bool = Field(False, description="Creado dentro de la ventana de novedad")


class ProjectDetail(ProjectSummaryBase):
    """Proyección de detalle con recruits ordenados y conteo de favoritos."""
    soft_skill: Optional[str] = None
    important_question: Optional[str] = None
    description: Optional[str] = None
    updated_at: datetime
    recruits: List[RecruitRead] = Field(default_factory=list)
    favorite_count: int = 0


__all__ = [
    "RecruitRequest",
    "ProjectRequest",
    "RecruitmentChangeIn",
    "RecruitRead",
    "ProjectSummaryBase",
    "ProjectListItem",
    "ProjectDetail",
]
# Fin del archivo backend/app/modules/projects/schemas/project_schemas.py
