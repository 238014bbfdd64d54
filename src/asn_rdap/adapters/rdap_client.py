"""Cliente RDAP sobre HTTPS (httpx) con bootstrap IANA para ASNs.

Flujo:
1) Descarga una vez por instancia el registro bootstrap de IANA (`asn.json`)
   y elige el RIR cuyo rango contiene el ASN (RFC 9224).
2) Consulta `<base>autnum/<query>` con la forma de consulta tal cual
   ("AS123" o "123"); el resolver decide el orden de las formas.

Los errores de httpx se traducen a `RDAPError` aquí, en el borde.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from asn_rdap.adapters.http_client import build_client
from asn_rdap.config import AppSettings
from asn_rdap.core.domain.models import AutnumRecord
from asn_rdap.core.errors import RDAPError, RDAPNotFound, RDAPTimeout
from asn_rdap.core.interfaces.rdap_client import RDAPClient

logger = logging.getLogger(__name__)


def asn_from_query(query: str) -> int:
    """Número de ASN de una consulta ("AS123", "as123" o "123")."""

    text = query.strip()
    if text[:2].upper() == "AS":
        text = text[2:]
    if not (text.isascii() and text.isdigit()):
        raise RDAPError(f"invalid autnum query: {query!r}", query=query)
    return int(text)


def _parse_range(entry: Any) -> tuple[int, int] | None:
    if not isinstance(entry, str):
        return None
    start, sep, end = entry.strip().partition("-")
    try:
        low = int(start)
        high = int(end) if sep else low
    except ValueError:
        return None
    return low, high


def select_service_url(bootstrap: Mapping[str, Any], asn: int) -> str | None:
    """URL base (terminada en '/') del servicio que cubre `asn`, o None.

    Formato IANA: `services = [[["1-1876", "1877"], ["https://...", "http://..."]], ...]`.
    Se prefiere https cuando el servicio publica varias URLs.
    """

    for service in bootstrap.get("services") or []:
        if not isinstance(service, (list, tuple)) or len(service) < 2:
            continue
        ranges, urls = service[0], service[1]
        if not isinstance(ranges, (list, tuple)) or not isinstance(urls, (list, tuple)):
            continue

        covered = False
        for entry in ranges:
            bounds = _parse_range(entry)
            if bounds and bounds[0] <= asn <= bounds[1]:
                covered = True
                break
        if not covered:
            continue

        candidates = [u for u in urls if isinstance(u, str) and u.lower().startswith("http")]
        if not candidates:
            continue
        chosen = next((u for u in candidates if u.lower().startswith("https://")), candidates[0])
        return chosen if chosen.endswith("/") else chosen + "/"
    return None


def _error_title(response: httpx.Response) -> str | None:
    # Las respuestas de error RDAP (RFC 9083 §6) traen `title` y `description`.
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("title"), str):
        return data["title"].strip() or None
    return None


class HttpRDAPClient(RDAPClient):
    """Implementación HTTPS de `RDAPClient`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_http = http is None
        self._http = http if http is not None else build_client(self._settings)
        self._bootstrap: dict[str, Any] | None = None

    def __enter__(self) -> "HttpRDAPClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _get_json(self, url: str, query: str | None) -> dict[str, Any]:
        try:
            response = self._http.get(url)
        except httpx.TimeoutException as exc:
            raise RDAPTimeout(f"timeout querying {url}", query=query, url=url) from exc
        except httpx.HTTPError as exc:
            raise RDAPError(f"request to {url} failed: {exc}", query=query, url=url) from exc

        logger.debug("GET %s -> HTTP %d", url, response.status_code)
        if response.status_code == 404:
            raise RDAPNotFound(f"not found: {url}", query=query, url=url)
        if not response.is_success:
            message = f"HTTP {response.status_code} from {url}"
            title = _error_title(response)
            if title:
                message = f"{message} ({title})"
            raise RDAPError(message, query=query, url=url)

        try:
            data = response.json()
        except ValueError as exc:
            raise RDAPError(f"invalid JSON from {url}", query=query, url=url) from exc
        if not isinstance(data, dict):
            raise RDAPError(f"unexpected RDAP payload from {url}", query=query, url=url)
        return data

    def bootstrap(self) -> dict[str, Any]:
        """Registro bootstrap de IANA (se descarga una vez por instancia)."""

        if self._bootstrap is None:
            logger.debug("fetching RDAP bootstrap %s", self._settings.bootstrap_url)
            self._bootstrap = self._get_json(self._settings.bootstrap_url, query=None)
        return self._bootstrap

    def resolve_endpoint(self, query: str) -> str:
        asn = asn_from_query(query)
        base = select_service_url(self.bootstrap(), asn)
        if base is None:
            raise RDAPNotFound(f"no RDAP server found for AS{asn}", query=query)
        return base

    def query_autnum(self, query: str) -> AutnumRecord | None:
        base = self.resolve_endpoint(query)
        url = f"{base}autnum/{quote(query.strip(), safe='')}"
        return AutnumRecord.from_rdap(self._get_json(url, query))
