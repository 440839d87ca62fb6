"""Doctor command: integridad del catálogo empaquetado y configuración."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import typer
from rich.console import Console

from licensit.cli.ui_components import build_doctor_table
from licensit.core.authors import resolve_author_with_source
from licensit.core.catalog import Catalog
from licensit.core.config import get_user_env_file, load_settings, write_user_env_vars
from licensit.core.domain.errors import LicensitError

app = typer.Typer(no_args_is_help=True, help="Catalog integrity checks and author configuration.")

_console = Console()


@dataclass(frozen=True)
class CheckResult:
    name: str
    ok: bool
    detail: str


def check_catalog(loader: Callable[[], Catalog] = Catalog.load) -> list[CheckResult]:
    """Verifica que el catálogo carga y que cada plantilla es coherente.

    Coherente = la plantilla existe y, si hay placeholders, ambos tokens
    aparecen al menos una vez en el texto.
    """

    try:
        catalog = loader()
    except LicensitError as exc:
        return [CheckResult("Descriptors", False, str(exc))]

    results = [CheckResult("Descriptors", True, f"{len(catalog)} licenses")]
    for descriptor in catalog:
        name = f"License {descriptor.id}"
        try:
            text = catalog.raw(descriptor.id)
        except LicensitError as exc:
            results.append(CheckResult(name, False, str(exc)))
            continue

        placeholders = descriptor.placeholders
        if placeholders is None:
            results.append(CheckResult(name, True, "no placeholders"))
            continue

        authors = text.count(placeholders.author_token)
        years = text.count(placeholders.year_token)
        ok = authors > 0 and years > 0
        detail = f"{placeholders.author_token} x{authors}, {placeholders.year_token} x{years}"
        results.append(CheckResult(name, ok, detail))
    return results


@app.command()
def run() -> None:
    """Run catalog checks and show the resolved author."""

    settings = load_settings()
    results = check_catalog()

    table = build_doctor_table()
    for result in results:
        table.add_row(result.name, "OK" if result.ok else "FAIL", result.detail)

    author, source = resolve_author_with_source(settings=settings)
    table.add_row("Author", "OK", f"{author} ({source.value})")
    table.add_row("User config", "OK", str(get_user_env_file()))

    _console.print(table)

    if not all(result.ok for result in results):
        raise typer.Exit(code=1)


@app.command(name="set-author")
def set_author(
    name: str = typer.Argument(None, help="Default author name (prompted when omitted)."),
) -> None:
    """Store a default author in the user config .env (LICENSE_AUTHOR)."""

    if name is None:
        name = typer.prompt("Author name").strip()
    name = name.strip()
    if not name:
        raise typer.BadParameter("author name must not be empty", param_hint="NAME")

    env_path = write_user_env_vars({"LICENSE_AUTHOR": name})
    _console.print(f"[green]Saved default author to:[/green] {env_path}", soft_wrap=True)
