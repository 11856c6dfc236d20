# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/schemas/comment_schemas.py

Schemas Pydantic de comentarios.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from datetime import datetime
from pydantic import Field, ConfigDict

from app.shared.utils.base_models import UTF8SafeModel

MAX_COMMENT_LENGTH = 2000


class CommentRequest(UTF8SafeModel):
    """Edición de un comentario: id + nuevo contenido."""
    comment_id: int = Field(..., alias="commentId", description="ID del comentario")
    content: str = Field(..., min_length=1, max_length=MAX_COMMENT_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={"example": {"commentId": 7, "content": "¡Me interesa el rol de Backend!"}}
    )


class CommentRead(UTF8SafeModel):
    comment_id: int
    project_id: int
    user_id: int
    content: str
    created_at: datetime
    updated_at: datetime


__all__ = ["MAX_COMMENT_LENGTH", "CommentRequest", "CommentRead"]
