"""Contrato del cliente RDAP.

Por qué Protocol:
- El resolver no conoce el transporte (HTTPS, bootstrap IANA, timeouts).
- Los tests sustituyen el cliente por un doble que devuelve registros en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from asn_rdap.core.domain.models import AutnumRecord


@runtime_checkable
class RDAPClient(Protocol):
    """Contrato mínimo de un cliente RDAP para autnums.

    Reglas de diseño:
    - Los fallos se señalan con `asn_rdap.core.errors.RDAPError` (o subclases).
    - Cada llamada está acotada por su propio timeout; el resolver no reintenta.
    """

    def resolve_endpoint(self, query: str) -> str:
        """URL base del registro que sirve el ASN contenido en `query`."""

        ...

    def query_autnum(self, query: str) -> AutnumRecord | None:
        """Consulta `query` ("AS123" o "123") y devuelve el registro autnum."""

        ...
