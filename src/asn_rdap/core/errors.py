"""Excepciones del Core.

Por qué una jerarquía propia:
- La CLI captura `AsnRdapError` por argumento sin conocer httpx ni pydantic.
- Los adaptadores traducen errores de transporte a `RDAPError` en el borde.
"""

from __future__ import annotations

from typing import Sequence


class AsnRdapError(Exception):
    """Base de todos los errores del proyecto."""


class InvalidInput(AsnRdapError, ValueError):
    """El ASN (o el argumento de la CLI) no es un entero válido."""


class RDAPError(AsnRdapError):
    """Fallo de una consulta RDAP concreta (red, HTTP, JSON)."""

    def __init__(self, message: str, *, query: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.query = query
        self.url = url


class RDAPNotFound(RDAPError):
    """El registro (o el bootstrap) no conoce el objeto consultado."""


class RDAPTimeout(RDAPError):
    """La consulta superó el timeout configurado."""


class UpstreamError(AsnRdapError):
    """Todas las formas de consulta fallaron; `__cause__` es el último error."""

    def __init__(self, message: str, *, asn: int, queries: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.asn = asn
        self.queries = tuple(queries)
