"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para bootstrap y consultas RDAP.
- Facilita testeo: se puede inyectar un `transport` (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from asn_rdap.config import AppSettings

RDAP_ACCEPT = "application/rdap+json, application/json;q=0.9"


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las consultas se comporten igual.
    - Los registros RDAP redirigen con frecuencia (p.ej. rdap.org -> RIR).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": RDAP_ACCEPT,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
