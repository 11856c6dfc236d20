# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/api_responses.py

Envoltorios de respuesta uniformes de la API:
- CommonApiResponse[T]: marcador de resultado + payload
- PageApiResponse[T]: lista paginada con total_pages / total_elements
- SliceApiResponse[T]: porción de lista con has_next (sin conteo total)

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from app.shared.utils.base_models import UTF8SafeModel

T = TypeVar("T")

RESULT_SUCCESS = "success"


class CommonApiResponse(UTF8SafeModel, Generic[T]):
    """Respuesta estándar: {"result": "success", "data": ...}."""
    result: str = Field(default=RESULT_SUCCESS, description="Marcador de resultado")
    data: Optional[T] = Field(default=None, description="Payload de la operación")

    @classmethod
    def success(cls, data: Optional[T] = None) -> "CommonApiResponse[T]":
        return cls(result=RESULT_SUCCESS, data=data)


class PageApiResponse(UTF8SafeModel, Generic[T]):
    """Respuesta paginada con totales."""
    result: str = RESULT_SUCCESS
    data: List[T] = Field(default_factory=list)
    total_pages: int = Field(0, ge=0)
    total_elements: int = Field(0, ge=0)


class SliceApiResponse(UTF8SafeModel, Generic[T]):
    """Porción de resultados; has_next indica si existe otra página."""
    result: str = RESULT_SUCCESS
    data: List[T] = Field(default_factory=list)
    page: int = Field(0, ge=0)
    size: int = Field(0, ge=0)
    has_next: bool = False


__all__ = [
    "RESULT_SUCCESS",
    "CommonApiResponse",
    "PageApiResponse",
    "SliceApiResponse",
]
