"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del catálogo empaquetado (ids únicos, tokens no
  vacíos) en el mismo punto donde se parsea el recurso.
- Los modelos son inmutables (`frozen`): el catálogo vive todo el proceso y
  nadie debe poder alterarlo tras la carga.

Nota:
- Estos modelos describen *qué* es una licencia, no *cómo* se lee su plantilla.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class Placeholders(BaseModel):
    """Tokens literales que se sustituyen al renderizar.

    Por qué existe:
    - No todas las licencias tienen campos rellenables; cuando los tienen,
      son siempre exactamente dos (autor y año).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    author_token: str = Field(
        ...,
        min_length=1,
        alias="author",
        description="Token literal del autor (p.ej. '[fullname]').",
    )
    year_token: str = Field(
        ...,
        min_length=1,
        alias="year",
        description="Token literal del año (p.ej. '[year]').",
    )

    @model_validator(mode="after")
    def _tokens_differ(self) -> "Placeholders":
        if self.author_token == self.year_token:
            raise ValueError("author and year tokens must differ")
        return self


class LicenseDescriptor(BaseModel):
    """Metadatos de una licencia del catálogo."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Clave corta y única (p.ej. 'mit').",
    )
    display_name: str = Field(
        ...,
        min_length=1,
        alias="name",
        description="Nombre completo legible de la licencia.",
    )
    template_ref: str = Field(
        ...,
        min_length=1,
        alias="template",
        description="Ruta relativa de la plantilla dentro de los datos empaquetados.",
    )
    placeholders: Placeholders | None = Field(
        default=None,
        description="Tokens a sustituir; ausente si la plantilla no tiene contenido variable.",
    )


class CatalogFile(BaseModel):
    """Documento de descriptores tal y como se empaqueta (`licenses.json`)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    licenses: tuple[LicenseDescriptor, ...] = Field(
        ...,
        min_length=1,
        description="Descriptores en orden de declaración.",
    )

    @model_validator(mode="after")
    def _unique_ids(self) -> "CatalogFile":
        seen: set[str] = set()
        for descriptor in self.licenses:
            if descriptor.id in seen:
                raise ValueError(f"duplicate license id: {descriptor.id!r}")
            seen.add(descriptor.id)
        return self
