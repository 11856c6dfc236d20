# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/facades/errors.py

Excepciones de dominio de comentarios.
ProjectNotFound / PermissionDenied se reutilizan del módulo de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from app.modules.projects.facades.errors import PermissionDenied, ProjectNotFound


class CommentNotFound(Exception):
    """No existe un comentario con ese id dentro del proyecto."""
    def __init__(self, project_id, comment_id):
        self.project_id = project_id
        self.comment_id = comment_id
        super().__init__(f"Comentario no encontrado: {comment_id} (proyecto {project_id})")


class InvalidCommentContent(Exception):
    """Contenido vacío o demasiado largo."""
    def __init__(self, message: str):
        super().__init__(message)


__all__ = [
    "CommentNotFound",
    "InvalidCommentContent",
    "PermissionDenied",
    "ProjectNotFound",
]
