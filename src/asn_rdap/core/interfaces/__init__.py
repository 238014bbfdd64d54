"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from asn_rdap.core.interfaces.rdap_client import RDAPClient

__all__ = ["RDAPClient"]
