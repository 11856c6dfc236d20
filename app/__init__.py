# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend Colabora.

Permite que los módulos internos puedan importarse como 'app.*'
cuando la carpeta 'backend' se incluye en PYTHONPATH.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

# Fin del archivo backend/app/__init__.py
