"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) del registro autnum.
- El dominio no conoce HTTP, CLI, ni configuración: solo conceptos RDAP.
"""

from asn_rdap.core.domain.models import (
    AutnumRecord,
    Entity,
    Remark,
    Resolution,
    VCard,
    VCardProperty,
)

__all__ = [
    "AutnumRecord",
    "Entity",
    "Remark",
    "Resolution",
    "VCard",
    "VCardProperty",
]
