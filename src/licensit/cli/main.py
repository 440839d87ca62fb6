"""CLI principal (Typer).

Comandos:
- list: licencias disponibles (orden de declaración)
- show: licencia renderizada, o la plantilla cruda con --template
- add:  escribe LICENSE en el directorio actual
- doctor: diagnósticos del catálogo y autor por defecto

La CLI solo resuelve valores (autor/año), traduce errores a códigos de salida
y escribe en consola. Todo lo demás vive en `core`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from licensit import __version__
from licensit.adapters.license_writer import write_license
from licensit.cli import doctor
from licensit.cli.ui_components import print_error, print_invalid_license
from licensit.core.authors import resolve_author, resolve_year
from licensit.core.catalog import Catalog, get_catalog
from licensit.core.config import load_settings
from licensit.core.domain.errors import CatalogError, LicenseNotFound
from licensit.core.domain.models import LicenseDescriptor


EXIT_FAILURE = 1
EXIT_INVALID_LICENSE = 2
LICENSE_FILENAME = "LICENSE"

app = typer.Typer(
    name="licensit",
    no_args_is_help=True,
    help="Console application for working with open source licenses.",
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    root = logging.getLogger("licensit")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(
        RichHandler(console=_err_console, show_time=False, show_path=False, markup=False)
    )
    root.setLevel(level)
    root.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"licensit {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr."),
) -> None:
    """Console application for working with open source licenses."""

    try:
        settings = load_settings()
    except ValidationError as exc:
        print_error(_err_console, "error", f"invalid configuration: {exc}")
        raise typer.Exit(code=EXIT_FAILURE) from exc
    _configure_logging("DEBUG" if verbose else settings.log_level)


def _load_catalog() -> Catalog:
    try:
        return get_catalog()
    except CatalogError as exc:
        print_error(_err_console, "fatal", str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc


def _find_or_exit(catalog: Catalog, license_id: str) -> LicenseDescriptor:
    try:
        return catalog.find(license_id)
    except LicenseNotFound as exc:
        print_invalid_license(_err_console, exc)
        raise typer.Exit(code=EXIT_INVALID_LICENSE) from exc


@app.command(name="list")
def list_licenses() -> None:
    """Print a list of available open source licenses."""

    for line in _load_catalog().format_listing():
        typer.echo(line)


@app.command()
def show(
    license_id: str = typer.Argument(..., metavar="LICENSE", help="License id (see `licensit list`)."),
    user: str = typer.Option(None, "--user", "-u", help="Author name (conflicts with --template)."),
    year: int = typer.Option(None, "--year", "-y", min=0, help="Copyright year (conflicts with --template)."),
    template: bool = typer.Option(False, "--template", "-t", help="Print the raw template."),
) -> None:
    """Print the content of the selected open source license."""

    if template and (user is not None or year is not None):
        raise typer.BadParameter(
            "'--template' cannot be used with '--user' or '--year'",
            param_hint="'--template'",
        )

    catalog = _load_catalog()
    descriptor = _find_or_exit(catalog, license_id)
    try:
        if template:
            text = catalog.raw(descriptor.id)
        else:
            text = catalog.render(descriptor.id, resolve_author(user), resolve_year(year))
    except CatalogError as exc:
        print_error(_err_console, "fatal", str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    typer.echo(text)


@app.command()
def add(
    license_id: str = typer.Argument(..., metavar="LICENSE", help="License id (see `licensit list`)."),
    user: str = typer.Option(None, "--user", "-u", help="Author name."),
    year: int = typer.Option(None, "--year", "-y", min=0, help="Copyright year."),
) -> None:
    """Write the selected license to a LICENSE file in the current directory."""

    settings = load_settings()
    catalog = _load_catalog()
    descriptor = _find_or_exit(catalog, license_id)
    try:
        text = catalog.render(descriptor.id, resolve_author(user, settings), resolve_year(year))
    except CatalogError as exc:
        print_error(_err_console, "fatal", str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    output_path = Path(LICENSE_FILENAME)
    try:
        write_license(text=text, output_path=output_path)
    except OSError as exc:
        print_error(_err_console, "error", f"cannot write {output_path}: {exc}")
        raise typer.Exit(code=EXIT_FAILURE) from exc

    typer.echo(f"Created {output_path} ({descriptor.display_name})")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
