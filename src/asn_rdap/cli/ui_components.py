"""Componentes de salida para la CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles de formato.
- Las líneas de resultado son texto plano estable (se parsean con grep/awk);
  Rich se usa solo para el volcado de diagnóstico y el logging.
"""

from __future__ import annotations

from rich.console import Console

from asn_rdap.core.domain.models import AutnumRecord, Resolution


def format_resolution(resolution: Resolution) -> str:
    """Línea de salida para un argumento."""

    if resolution.asn is None:
        return f"{resolution.argument}: invalid ASN: {resolution.error}"
    label = f"AS{resolution.asn}"
    if resolution.error is not None:
        return f"{label}: error: {resolution.error}"
    if not resolution.name:
        return f"{label}: (no name found)"
    return f"{label}: {resolution.name}"


def print_raw_record(console: Console, query: str, record: AutnumRecord) -> None:
    """Volcado legible del documento RDAP crudo (modo `-v`)."""

    console.print(f"RDAP autnum for {query}:", markup=False, highlight=False, emoji=False)
    console.print_json(data=record.raw_document(), indent=2)
