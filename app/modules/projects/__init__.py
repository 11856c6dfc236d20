# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/__init__.py

Módulo de proyectos de Colabora.

Este módulo gestiona:
- Publicación de proyectos con roles buscados (recruits) y archivo adjunto
- Listados (general con filtros, hot, favoritos, propios) con flag "recent"
- Detalle con contador de vistas
- Actualización / eliminación por el dueño
- Apertura / cierre de la convocatoria y favoritos

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

# Paquete liviano: no importes modelos aquí (para no disparar mapeos al importar enums).

__all__ = []
# Fin del archivo
