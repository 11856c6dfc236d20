# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/repositories/__init__.py

Repositorios del módulo de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from . import project_repository, favorite_repository

__all__ = ["project_repository", "favorite_repository"]
