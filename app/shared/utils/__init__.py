# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .base_models import UTF8SafeModel, Field
from .api_responses import CommonApiResponse, PageApiResponse, SliceApiResponse
from .pagination import PageRequest, total_pages
from .http_exceptions import (
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    PayloadTooLargeException,
    UnprocessableEntityException,
    BadGatewayException,
)

__all__ = [
    # Base models
    "UTF8SafeModel",
    "Field",

    # Envelopes / paginación
    "CommonApiResponse",
    "PageApiResponse",
    "SliceApiResponse",
    "PageRequest",
    "total_pages",

    # HTTP Exceptions
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "PayloadTooLargeException",
    "UnprocessableEntityException",
    "BadGatewayException",
]
