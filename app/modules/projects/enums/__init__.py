# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/__init__.py

Enums del módulo de proyectos.
"""

from .recruitment_status_enum import RecruitmentStatus

__all__ = ["RecruitmentStatus"]
