"""Cargador de recursos empaquetados (descriptores y plantillas).

Este módulo vive en `core/` porque:
- centraliza el *dónde* están los datos (dentro del paquete instalado) sin
  acoplarse a la CLI;
- la CLI debe funcionar desde cualquier directorio: nunca se resuelve nada
  relativo al cwd.

Un recurso ausente aquí es un paquete roto, no un error del usuario.
"""

from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import PurePosixPath

from licensit.core.domain.errors import CatalogError, TemplateNotFound


logger = logging.getLogger(__name__)

PACKAGE_NAME = "licensit"
DESCRIPTOR_FILENAME = "licenses.json"


def _data_root() -> Traversable:
    return resources.files(PACKAGE_NAME) / "data"


def _resolve(relative_ref: str) -> Traversable | None:
    """Traduce una ruta relativa (`templates/mit.txt`) a un recurso.

    Devuelve None si la ruta intenta salir del directorio de datos.
    """

    path = PurePosixPath(relative_ref)
    if path.is_absolute() or ".." in path.parts or not path.parts:
        return None
    node = _data_root()
    for part in path.parts:
        node = node / part
    return node


def read_descriptor_resource() -> str:
    """Texto del `licenses.json` empaquetado."""

    resource = _data_root() / DESCRIPTOR_FILENAME
    if not resource.is_file():
        raise CatalogError(f"bundled descriptor resource missing: {DESCRIPTOR_FILENAME}")
    try:
        return resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"cannot read {DESCRIPTOR_FILENAME}: {exc}") from exc


def read_template(template_ref: str) -> str:
    """Texto literal (UTF-8) de una plantilla empaquetada."""

    resource = _resolve(template_ref)
    if resource is None or not resource.is_file():
        raise TemplateNotFound(template_ref)
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"cannot read template {template_ref!r}: {exc}") from exc
    logger.debug("loaded template %s (%d chars)", template_ref, len(text))
    return text


class BundledTemplateStore:
    """`TemplateStore` respaldado por los datos del paquete instalado."""

    def read(self, template_ref: str) -> str:
        return read_template(template_ref)
