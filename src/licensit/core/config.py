"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite guardar un autor por defecto en el `.env` del usuario y que tanto
  `add` como `show` lo lean de forma consistente.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "licensit"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _unquote_env_value(value: str) -> str:
    """Inversa de `_quote_env_value` (mismas reglas que python-dotenv)."""

    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r'\\([\\"])', r"\1", value[1:-1])
    return value


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = _unquote_env_value(value.strip())
        if key:
            data[key] = value
    return data


def _quote_env_value(value: str) -> str:
    if value and not any(ch.isspace() or ch in "#'\"\\" for ch in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Si el `.env` existente no se puede leer, el error se propaga y el fichero
    queda intacto.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# licensit user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={_quote_env_value(existing[key])}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Las variables reales del entorno tienen prioridad sobre los `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="LICENSIT_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    author: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LICENSE_AUTHOR", "LICENSIT_AUTHOR"),
        description="Autor por defecto cuando no se pasa --user.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> AppSettings:
    """Construye `AppSettings` resolviendo el `.env` de usuario en este momento.

    `model_config.env_file` se evalúa al importar el módulo; aquí se recalcula
    por si `XDG_CONFIG_HOME`/`HOME` cambiaron desde entonces.
    """

    return AppSettings(_env_file=(".env", str(get_user_env_file())))
