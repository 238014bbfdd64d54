"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con pipelines (jq, inventarios de red) sin parsear la salida de texto.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from asn_rdap.core.domain.models import Resolution


def export_resolutions_json(*, resolutions: Iterable[Resolution], output_path: Path) -> Path:
    """Exporta las resoluciones a un array JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.model_dump(mode="json") for r in resolutions]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
