"""Configuración de la aplicación.

Por qué aquí (y no en `core/`):
- El Core no lee variables de entorno; recibe el cliente RDAP ya construido.
- Adaptadores y CLI leen la config de forma consistente (pydantic-settings).
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

IANA_ASN_BOOTSTRAP_URL = "https://data.iana.org/rdap/asn.json"


class AppSettings(BaseSettings):
    """Configuración central.

    Todas las claves se pueden fijar con variables `ASN_RDAP_*` o en `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASN_RDAP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=6.0,
        gt=0,
        description="Timeout por request RDAP (segundos).",
    )
    user_agent: str = Field(
        default="asn-rdap/0.1 (+https://github.com)",
        min_length=1,
        description="User-Agent para las consultas RDAP.",
    )
    bootstrap_url: str = Field(
        default=IANA_ASN_BOOTSTRAP_URL,
        min_length=8,
        description="Registro bootstrap de IANA para ASNs (RFC 9224).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para el logger `asn_rdap`.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
