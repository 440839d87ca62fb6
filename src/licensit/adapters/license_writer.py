"""Escritura del fichero LICENSE.

Por qué está en adapters:
- Es el único efecto secundario de la herramienta sobre el proyecto del
  usuario; el Core solo produce texto.
"""

from __future__ import annotations

import logging
from pathlib import Path


logger = logging.getLogger(__name__)


def write_license(*, text: str, output_path: Path) -> Path:
    """Escribe `text` tal cual (UTF-8), sobrescribiendo si ya existe.

    No añade salto de línea final: el contenido es exactamente el renderizado.
    Los `OSError` se propagan para que la CLI los reporte.
    """

    with output_path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    logger.info("wrote %s (%d chars)", output_path, len(text))
    return output_path
