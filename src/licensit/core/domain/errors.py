"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI decide el código de salida según la clase (catálogo roto -> 1,
  licencia desconocida -> 2) sin inspeccionar mensajes.
- El Core no imprime nada: devuelve datos estructurados en la excepción.
"""

from __future__ import annotations

from typing import Sequence


class LicensitError(Exception):
    """Base de todos los errores de licensit."""


class CatalogError(LicensitError):
    """Recurso empaquetado ausente o malformado (build roto, no error de usuario)."""


class TemplateNotFound(CatalogError):
    def __init__(self, template_ref: str) -> None:
        super().__init__(f"bundled template not found: {template_ref!r}")
        self.template_ref = template_ref


class LicenseNotFound(LicensitError):
    """El id pedido no existe en el catálogo.

    Lleva el id inválido y la lista completa de ids válidos (orden de
    declaración) para que la CLI pueda sugerir alternativas.
    """

    def __init__(self, license_id: str, valid_ids: Sequence[str]) -> None:
        super().__init__(f"unknown license {license_id!r}")
        self.license_id = license_id
        self.valid_ids = tuple(valid_ids)
