# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/pagination.py

Paginación basada en offset (página 0-indexada).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageRequest:
    """Página solicitada (0-indexada) y tamaño ya acotado."""
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: Optional[int], *, default_size: int, max_size: int) -> "PageRequest":
        """
        Normaliza parámetros de entrada: page negativa → 0, size ausente →
        default_size, size fuera de rango → [1, max_size].
        """
        effective = default_size if size is None else size
        effective = max(1, min(effective, max_size))
        return cls(page=max(0, page), size=effective)


def total_pages(total: int, size: int) -> int:
    """Número de páginas para `total` elementos (0 si no hay elementos)."""
    if total <= 0 or size <= 0:
        return 0
    return (total + size - 1) // size


__all__ = ["PageRequest", "total_pages"]
