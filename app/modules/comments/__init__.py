# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/__init__.py

Módulo de comentarios sobre proyectos (CRUD con autoría por JWT).

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

__all__ = []
