"""Catálogo de licencias.

Responsabilidades:
- resolver un id exacto a su descriptor (sin case-folding ni coincidencias
  parciales);
- enumerar los descriptores en el orden en que se declaran en el recurso
  empaquetado (el orden es parte del contrato de salida de `list`).

El catálogo se carga una sola vez por proceso (`get_catalog`) y es inmutable.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator, Sequence

from licensit.adapters.descriptor_loader import parse_descriptors
from licensit.core.domain.errors import CatalogError, LicenseNotFound
from licensit.core.domain.models import LicenseDescriptor
from licensit.core.interfaces.template_store import TemplateStore
from licensit.core.renderer import render_raw, render_template
from licensit.core.resources_loader import BundledTemplateStore, read_descriptor_resource


logger = logging.getLogger(__name__)

# Ancho fijo de la columna de ids en `list`.
LISTING_COLUMN_WIDTH = 12


class Catalog:
    def __init__(
        self,
        descriptors: Sequence[LicenseDescriptor],
        *,
        store: TemplateStore | None = None,
    ) -> None:
        by_id: dict[str, LicenseDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.id in by_id:
                raise CatalogError(f"duplicate license id: {descriptor.id!r}")
            by_id[descriptor.id] = descriptor

        self._descriptors = tuple(descriptors)
        self._by_id = by_id
        self.store: TemplateStore = store or BundledTemplateStore()

    @classmethod
    def from_text(cls, raw: str, *, store: TemplateStore | None = None) -> "Catalog":
        document = parse_descriptors(raw)
        return cls(document.licenses, store=store)

    @classmethod
    def load(cls) -> "Catalog":
        """Carga el catálogo desde los recursos empaquetados.

        Lanza `CatalogError` si el recurso falta o está malformado.
        """

        catalog = cls.from_text(read_descriptor_resource())
        logger.debug("catalog loaded: %d licenses", len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[LicenseDescriptor]:
        return iter(self._descriptors)

    def __contains__(self, license_id: object) -> bool:
        return license_id in self._by_id

    def find(self, license_id: str) -> LicenseDescriptor:
        try:
            return self._by_id[license_id]
        except KeyError:
            raise LicenseNotFound(license_id, self.ids()) from None

    def ids(self) -> list[str]:
        return [d.id for d in self._descriptors]

    def list(self) -> list[tuple[str, str]]:
        """Pares `(id, display_name)` en orden de declaración."""

        return [(d.id, d.display_name) for d in self._descriptors]

    def format_listing(self) -> list[str]:
        """Una línea por licencia: id alineado a la izquierda y nombre completo."""

        longest = max((len(d.id) for d in self._descriptors), default=0)
        width = max(LISTING_COLUMN_WIDTH, longest + 1)
        return [f"{license_id:<{width}}{name}" for license_id, name in self.list()]

    def raw(self, license_id: str) -> str:
        return render_raw(self.find(license_id), store=self.store)

    def render(self, license_id: str, author: str, year: int) -> str:
        return render_template(self.find(license_id), author, year, store=self.store)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Catálogo del proceso (carga perezosa, una sola vez)."""

    return Catalog.load()
