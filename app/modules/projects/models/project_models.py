# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/project_models.py

Modelos SQLAlchemy del agregado Project:
- Project: publicación de reclutamiento (dueño, metadatos, archivo adjunto)
- Recruit: rol abierto dentro de un proyecto (sin ciclo de vida propio)

El campo `position` es un resumen derivado: siempre igual a las posiciones
de los recruits unidas por ", " en orden. Solo lo escriben los facades.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.shared.database import Base, str_enum
from app.modules.projects.enums import RecruitmentStatus


class Project(Base):
    """
    Publicación de un proyecto que busca colaboradores.

    - user_id: id del usuario dueño (usuario externo, sin FK)
    - file_url: URL pública del archivo adjunto; "" si no hay archivo
    - view_count: contador de lecturas del detalle
    """

    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, autoincrement=True)

    # Owner
    user_id = Column(BigInteger, nullable=False, index=True)

    # Metadatos
    title = Column(String(255), nullable=False)
    file_url = Column(String(1024), nullable=False, default="", server_default="")
    deadline = Column(DateTime(timezone=True), nullable=True)
    soft_skill = Column(Text, nullable=True)
    important_question = Column(Text, nullable=True)
    tech_stack = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)

    # Resumen derivado de recruits
    position = Column(String(1024), nullable=False, default="", server_default="")

    recruitment = Column(
        str_enum(RecruitmentStatus),
        nullable=False,
        default=RecruitmentStatus.OPEN,
        server_default=RecruitmentStatus.OPEN.value,
        index=True,
    )
    view_count = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    recruits = relationship(
        "Recruit",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Recruit.sort_order",
    )

    __table_args__ = (
        Index("idx_projects_hot", recruitment, view_count),
    )

    def __repr__(self):
        return (
            f"<Project(project_id={self.project_id}, "
            f"title='{self.title}', "
            f"recruitment={self.recruitment})>"
        )


class Recruit(Base):
    """Rol abierto dentro de un proyecto (posición + cupos cubiertos/objetivo)."""

    __tablename__ = "recruits"

    recruit_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(String(100), nullable=False)
    current_count = Column(Integer, nullable=False, default=0)
    target_count = Column(Integer, nullable=False, default=0)
    sort_order = Column(Integer, nullable=False, default=0)

    project = relationship("Project", back_populates="recruits")

    def __repr__(self):
        return (
            f"<Recruit(recruit_id={self.recruit_id}, "
            f"position='{self.position}', "
            f"{self.current_count}/{self.target_count})>"
        )


__all__ = ["Project", "Recruit"]
# Fin del archivo backend/app/modules/projects/models/project_models.py
