# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/errors.py

Excepciones de dominio para el módulo de proyectos.
Las rutas las traducen a HTTPException (404 / 403 / 502).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""


class ProjectNotFound(Exception):
    """Se lanza cuando no se encuentra un proyecto por ID (o no pertenece al usuario en delete)."""
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Proyecto no encontrado: {identifier}")


class PermissionDenied(Exception):
    """Se lanza cuando un usuario no tiene permisos para una operación."""
    def __init__(self, message: str):
        super().__init__(message)


class ProjectFileStorageError(Exception):
    """Falla al subir el archivo adjunto al object storage."""
    def __init__(self, message: str):
        super().__init__(message)


__all__ = [
    "ProjectNotFound",
    "PermissionDenied",
    "ProjectFileStorageError",
]

# Fin del archivo backend/app/modules/projects/facades/errors.py
