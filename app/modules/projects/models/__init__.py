# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/__init__.py

Modelos ORM del módulo de proyectos.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from .project_models import Project, Recruit
from .project_favorite_models import ProjectFavorite

__all__ = ["Project", "Recruit", "ProjectFavorite"]
