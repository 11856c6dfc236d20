# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/recent.py

Flag "recent" de los listados: se calcula en cada lectura, nunca se persiste.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

import datetime as dt
from typing import Optional

DEFAULT_RECENT_WINDOW = dt.timedelta(hours=24)


def _as_utc(value: dt.datetime) -> dt.datetime:
    # SQLite devuelve datetimes naive: se interpretan como UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def is_recent(
    created_at: Optional[dt.datetime],
    now: dt.datetime,
    window: dt.timedelta = DEFAULT_RECENT_WINDOW,
) -> bool:
    """
    True si `now - created_at < window`.

    Un proyecto creado en T es reciente en [T, T + window) y deja de serlo
    exactamente en T + window.
    """
    if created_at is None:
        return False
    return _as_utc(now) - _as_utc(created_at) < window


__all__ = ["DEFAULT_RECENT_WINDOW", "is_recent"]
