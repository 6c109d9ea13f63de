"""Configuración del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el Core.
- Permite que el transporte HTTP y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_env_file() -> Path:
    """`.env` por usuario: `$XDG_CONFIG_HOME/podio-sdk/.env` (o `~/.config`)."""

    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "podio-sdk" / ".env"


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env del usuario; `None` no toca nada."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del SDK.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para transporte y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="PODIO_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.podio.com",
        min_length=8,
        description="Base URL de la API REST.",
    )
    access_token: str | None = Field(
        default=None,
        description="Token OAuth2 ya emitido (el SDK no lo refresca).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="podio-sdk/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging usado por la CLI (DEBUG, INFO, WARNING...).",
    )
