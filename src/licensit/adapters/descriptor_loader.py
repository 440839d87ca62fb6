"""Carga del documento de descriptores (JSON, data-driven).

Formato:
    {"licenses": [{"id": ..., "name": ..., "template": ..., "placeholders": {...}}]}

`placeholders` es opcional; cuando está presente lleva exactamente las claves
`author` y `year`.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from licensit.core.domain.errors import CatalogError
from licensit.core.domain.models import CatalogFile


def parse_descriptors(raw: str) -> CatalogFile:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"malformed descriptor resource: {exc}") from exc
    try:
        return CatalogFile.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"invalid descriptor resource: {exc}") from exc
