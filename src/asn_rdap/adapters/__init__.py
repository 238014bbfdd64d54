"""Adaptadores de I/O (HTTP, exportación).

Implementan los contratos de `asn_rdap.core.interfaces`.
"""
