"""Resolución del autor y del año por defecto.

Cadena de precedencia del autor:
1) `--user` explícito
2) `LICENSE_AUTHOR` (entorno o `.env`, vía `AppSettings`)
3) `user.name` de la configuración de git
4) usuario del sistema operativo
5) el literal "user"

El Core recibe siempre un autor ya resuelto; esto es lo que la CLI usa para
resolverlo.
"""

from __future__ import annotations

import getpass
import logging
import subprocess
from datetime import datetime
from enum import Enum

from licensit.core.config import AppSettings, load_settings


logger = logging.getLogger(__name__)

FALLBACK_AUTHOR = "user"


class AuthorSource(str, Enum):
    """Origen del autor resuelto (se muestra en `doctor`)."""

    OPTION = "option"
    ENVIRONMENT = "environment"
    GIT = "git"
    OS_USER = "os-user"
    FALLBACK = "fallback"


def read_git_config(key: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "config", "--get", key],
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return ""
    return completed.stdout.strip()


def _os_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError) as exc:
        logger.debug("cannot determine OS user: %s", exc)
        return ""


def resolve_author_with_source(
    explicit: str | None = None,
    settings: AppSettings | None = None,
) -> tuple[str, AuthorSource]:
    if explicit:
        return explicit, AuthorSource.OPTION

    settings = settings or load_settings()
    if settings.author:
        return settings.author, AuthorSource.ENVIRONMENT
    logger.debug("LICENSE_AUTHOR not set")

    git_name = read_git_config("user.name")
    if git_name:
        return git_name, AuthorSource.GIT
    logger.debug("git user.name not available")

    os_name = _os_user()
    if os_name:
        return os_name, AuthorSource.OS_USER
    logger.debug("falling back to %r", FALLBACK_AUTHOR)

    return FALLBACK_AUTHOR, AuthorSource.FALLBACK


def resolve_author(explicit: str | None = None, settings: AppSettings | None = None) -> str:
    author, _ = resolve_author_with_source(explicit, settings)
    return author


def resolve_year(explicit: int | None = None) -> int:
    if explicit is not None:
        return explicit
    return datetime.now().year
