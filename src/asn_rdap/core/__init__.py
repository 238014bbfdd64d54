"""Core: resolución ASN -> nombre de organización.

No depende de transporte ni de configuración; el cliente RDAP se inyecta.
"""
