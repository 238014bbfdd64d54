"""CLI de asn-rdap (Typer).

Uso:
    asn-rdap [-v] [-o resultados.json] ASN [ASN...]

Cada argumento produce una línea en stdout; los fallos de un ASN no abortan
el resto. El logging (Rich) va a stderr para no mezclarse con los resultados.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from asn_rdap.adapters.json_exporter import export_resolutions_json
from asn_rdap.adapters.rdap_client import HttpRDAPClient
from asn_rdap.cli.ui_components import format_resolution, print_raw_record
from asn_rdap.config import AppSettings
from asn_rdap.core.domain.models import AutnumRecord, Resolution
from asn_rdap.core.services.batch import resolve_arguments
from asn_rdap.core.services.resolver import AsnResolver, ResolverHooks

app = typer.Typer(
    add_completion=False,
    help="Resolve Autonomous System Numbers to organization names via RDAP.",
)

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Instala un `RichHandler` (stderr) en el logger del paquete."""

    logger = logging.getLogger("asn_rdap")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_err_console, show_path=False))


def _raw_record_hook(query: str, record: AutnumRecord) -> None:
    print_raw_record(_console, query, record)


# Flags only before the first ASN, so "-1" after an ASN is reported per argument.
@app.command(context_settings={"allow_interspersed_args": False})
def lookup(
    asns: List[str] = typer.Argument(
        ...,
        metavar="ASN...",
        help="One or more AS numbers (decimal, without the 'AS' prefix).",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Print the full RDAP autnum JSON before each result.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Also write all results as a JSON array to this file.",
        dir_okay=False,
    ),
) -> None:
    """Look up the organization name registered for each ASN."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    resolutions: list[Resolution] = []
    with HttpRDAPClient(settings) as client:
        resolver = AsnResolver(client, hooks=ResolverHooks(raw_record=_raw_record_hook))
        for resolution in resolve_arguments(resolver, asns, verbose=verbose):
            typer.echo(format_resolution(resolution))
            resolutions.append(resolution)

    if output is not None:
        path = export_resolutions_json(resolutions=resolutions, output_path=output)
        _err_console.print(f"[green]Saved results to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
