# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista y seguro: logging moderado, base de datos SQLite
en memoria y un secreto JWT fijo para firmar tokens de prueba.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "test"

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "pretty", "plain"] = "pretty"

    # --- Base de datos: SQLite en memoria (sobrescribible con DB_URL) ---
    db_url: Optional[str] = Field(default="sqlite+aiosqlite:///:memory:", validation_alias="DB_URL")

    # --- Auth: secreto determinista para tokens de prueba ---
    jwt_secret_key: SecretStr = Field(
        default=SecretStr("test-secret-for-colabora-suite-0123456789"),
        validation_alias="JWT_SECRET_KEY",
    )

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
