"""ASN resolution orchestration.

The resolver owns the policy around a lookup: input validation, the private
range short-circuit, and the ordered list of query forms. Transport is the
injected `RDAPClient`; name selection is `extract_name`. Side-effects
(verbose dumps) go through `ResolverHooks` so UI layers decide where they land.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Callable

from asn_rdap.core.domain.models import AutnumRecord
from asn_rdap.core.errors import InvalidInput, RDAPError, UpstreamError
from asn_rdap.core.interfaces.rdap_client import RDAPClient
from asn_rdap.core.services.extractor import extract_name

logger = logging.getLogger(__name__)

PRIVATE_ASN_NAME = "Private ASN"
PRIVATE_ASN_RANGE = (64512, 65535)
MAX_ASN = 4_294_967_295

_DECIMAL = re.compile(r"[+-]?[0-9]+")

# Rango de un entero con signo de 64 bits.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_asn(text: str) -> int:
    """Parse a CLI argument as a decimal ASN (sign allowed, nothing else)."""

    if not _DECIMAL.fullmatch(text):
        raise InvalidInput(f"not a decimal integer: {text!r}")
    if len(text.lstrip("+-").lstrip("0")) > 19:
        raise InvalidInput(f"value out of range: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidInput(f"value out of range: {text!r}")
    return value


def validate_asn(asn: int) -> int:
    if isinstance(asn, bool) or not isinstance(asn, int):
        raise InvalidInput(f"invalid ASN: {asn!r}")
    if asn <= 0 or asn > MAX_ASN:
        raise InvalidInput(f"invalid ASN: {asn}")
    return asn


def is_private_asn(asn: int) -> bool:
    low, high = PRIVATE_ASN_RANGE
    return low <= asn <= high


def query_candidates(asn: int) -> tuple[str, ...]:
    """Query strings to try, in order; registries disagree on the form."""

    return (f"AS{asn}", str(asn))


def format_raw_record(query: str, record: AutnumRecord) -> str:
    body = json.dumps(record.raw_document(), ensure_ascii=False, indent=2)
    return f"RDAP autnum for {query}:\n{body}"


def _print_raw_record(query: str, record: AutnumRecord) -> None:
    print(format_raw_record(query, record))


@dataclass
class ResolverHooks:
    """Optional callbacks for UI layers."""

    raw_record: Callable[[str, AutnumRecord], None] | None = None


class AsnResolver:
    """Resolves one ASN at a time against an injected RDAP client."""

    def __init__(self, client: RDAPClient, hooks: ResolverHooks | None = None) -> None:
        self._client = client
        self._hooks = hooks or ResolverHooks()

    def resolve(self, asn: int, verbose: bool = False) -> str:
        """Return the organization name for `asn` ("" when the registry has none).

        Raises `InvalidInput` before any network access when `asn` is out of
        range, and `UpstreamError` when every query form failed.
        """

        validate_asn(asn)
        if is_private_asn(asn):
            logger.debug("AS%d is in the private range, skipping lookup", asn)
            return PRIVATE_ASN_NAME

        queries = query_candidates(asn)
        last_error: RDAPError | None = None
        for query in queries:
            logger.debug("querying RDAP autnum %s", query)
            try:
                record = self._client.query_autnum(query)
            except RDAPError as exc:
                logger.debug("RDAP query %s failed: %s", query, exc)
                last_error = exc
                continue
            if record is None:
                last_error = RDAPError(f"nil RDAP autnum response for {query}", query=query)
                logger.debug("%s", last_error)
                continue

            if verbose:
                (self._hooks.raw_record or _print_raw_record)(query, record)
            # A registry that answers without a name still ends the loop.
            return extract_name(record)

        if last_error is None:
            raise UpstreamError(f"no query candidates for AS{asn}", asn=asn, queries=queries)
        raise UpstreamError(str(last_error), asn=asn, queries=queries) from last_error
