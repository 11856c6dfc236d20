# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/models/comment_models.py

Modelo SQLAlchemy de comentarios. Se eliminan en cascada con su proyecto.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.sql import func

from app.shared.database import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
    )
    # Autor (usuario externo, sin FK)
    user_id = Column(BigInteger, nullable=False, index=True)
    content = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_comments_project_created", project_id, created_at),
    )

    def __repr__(self):
        return f"<Comment(comment_id={self.comment_id}, project_id={self.project_id}, user_id={self.user_id})>"


__all__ = ["Comment"]
# Fin del archivo backend/app/modules/comments/models/comment_models.py
