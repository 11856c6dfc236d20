# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base personalizado para Pydantic en el backend de Colabora.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace = True`)
- Modo de atributos activado para compatibilidad con ORM (`from_attributes = True`)
- Aliases poblables por nombre (`populate_by_name = True`)

Este modelo debe usarse como base para todos los esquemas Pydantic de la API.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from pydantic import BaseModel, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    """Modelo base para requests/responses JSON de la API."""
    model_config = ConfigDict(
        from_attributes=True,             # reemplaza a orm_mode=True
        populate_by_name=True,            # para que funcionen los aliases
        str_strip_whitespace=True,        # elimina espacios de strings
    )


__all__ = ["UTF8SafeModel", "Field"]
# Fin del archivo backend/app/shared/utils/base_models.py
