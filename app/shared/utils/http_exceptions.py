# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP personalizadas para la API de Colabora.
Estandariza respuestas de error con códigos HTTP apropiados.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class BadRequestException(HTTPException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    def __init__(
        self,
        detail: Any = "Solicitud inválida",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            headers=headers
        )


class UnauthorizedException(HTTPException):
    """401 - Autenticación requerida o credenciales inválidas"""
    def __init__(
        self,
        detail: Any = "No autorizado - credenciales inválidas o ausentes",
        headers: Optional[Dict[str, Any]] = None
    ):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers=headers
        )


class ForbiddenException(HTTPException):
    """403 - Usuario autenticado pero sin permisos sobre el recurso"""
    def __init__(
        self,
        detail: Any = "Acceso prohibido - permisos insuficientes",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            headers=headers
        )


class NotFoundException(HTTPException):
    """404 - Recurso no encontrado"""
    def __init__(
        self,
        detail: Any = "Recurso no encontrado",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            headers=headers
        )


class PayloadTooLargeException(HTTPException):
    """413 - Archivo o cuerpo demasiado grande"""
    def __init__(
        self,
        detail: Any = "El archivo excede el tamaño máximo permitido",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=413, detail=detail, headers=headers)


class UnprocessableEntityException(HTTPException):
    """422 - La sintaxis es correcta pero la semántica es errónea"""
    def __init__(
        self,
        detail: Any = "Entidad no procesable - validación semántica fallida",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=422, detail=detail, headers=headers)


class BadGatewayException(HTTPException):
    """502 - Falla de un servicio externo (p. ej. object storage)"""
    def __init__(
        self,
        detail: Any = "Error en servicio externo",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            headers=headers
        )


__all__ = [
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "PayloadTooLargeException",
    "UnprocessableEntityException",
    "BadGatewayException",
]
