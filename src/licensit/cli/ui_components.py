"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El texto de las licencias nunca pasa por Rich (los tokens tipo `[year]`
  se interpretarían como markup); aquí solo van mensajes y tablas.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from licensit.core.domain.errors import LicenseNotFound


def build_invalid_license_message(error: LicenseNotFound) -> Text:
    """Mensaje de id desconocido con los ids válidos resaltados."""

    message = Text()
    message.append("error:", style="bold red")
    message.append(" invalid value '")
    message.append(error.license_id, style="yellow")
    message.append("' for '<LICENSE>'. Possible values: ")
    for index, license_id in enumerate(error.valid_ids):
        if index:
            message.append(", ")
        message.append(license_id, style="green")
    message.append("\n\nFor more information, try '--help'.")
    return message


def print_invalid_license(console: Console, error: LicenseNotFound) -> None:
    console.print(build_invalid_license_message(error), soft_wrap=True)


def print_error(console: Console, label: str, detail: str) -> None:
    console.print(Text.assemble((f"{label}:", "bold red"), " ", detail), soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="licensit doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
