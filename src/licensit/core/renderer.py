"""Renderizado de licencias: sustitución literal de tokens.

Sin motor de plantillas: dos `str.replace` (autor, luego año), todas las
ocurrencias, sin regex ni escapado.
"""

from __future__ import annotations

from licensit.core.domain.models import LicenseDescriptor
from licensit.core.interfaces.template_store import TemplateStore
from licensit.core.resources_loader import BundledTemplateStore


_bundled_store = BundledTemplateStore()


def render_raw(descriptor: LicenseDescriptor, *, store: TemplateStore | None = None) -> str:
    """Texto de la plantilla sin modificar (modo `--template`)."""

    return (store or _bundled_store).read(descriptor.template_ref)


def render_template(
    descriptor: LicenseDescriptor,
    author: str,
    year: int,
    *,
    store: TemplateStore | None = None,
) -> str:
    """Renderiza la licencia con `author` y `year`.

    Si el descriptor no tiene placeholders, la plantilla se devuelve tal cual
    y `author`/`year` se ignoran.
    """

    text = render_raw(descriptor, store=store)
    placeholders = descriptor.placeholders
    if placeholders is None:
        return text

    text = text.replace(placeholders.author_token, author)
    return text.replace(placeholders.year_token, str(year))
