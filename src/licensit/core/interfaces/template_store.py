"""Contrato del almacén de plantillas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El catálogo recibe el almacén por parámetro: en producción son los recursos
  empaquetados, en tests un dict en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TemplateStore(Protocol):
    """Contrato mínimo para obtener el texto de una plantilla.

    Reglas de diseño:
    - `read` es síncrono: los recursos están empaquetados, no hay red.
    - Una referencia inexistente lanza `TemplateNotFound` (fatal).
    """

    def read(self, template_ref: str) -> str:
        """Devuelve el texto literal (UTF-8) asociado a `template_ref`."""

        ...
