# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/project_favorite_models.py

Marcas de "favorito" de usuarios sobre proyectos.
Un usuario marca un proyecto a lo sumo una vez (user_id, project_id únicos).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.sql import func

from app.shared.database import Base


class ProjectFavorite(Base):
    __tablename__ = "project_favorites"

    favorite_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, nullable=False, index=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_project_favorites_user_project"),
    )

    def __repr__(self):
        return f"<ProjectFavorite(user_id={self.user_id}, project_id={self.project_id})>"


__all__ = ["ProjectFavorite"]
