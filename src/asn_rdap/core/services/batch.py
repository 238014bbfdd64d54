"""Per-argument resolution for batch callers (CLI, exports).

Failures are contained per argument: each one becomes a `Resolution` with a
status, and the batch always continues.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from asn_rdap.core.domain.models import Resolution
from asn_rdap.core.errors import AsnRdapError, InvalidInput
from asn_rdap.core.services.resolver import AsnResolver, parse_asn


def resolve_argument(resolver: AsnResolver, argument: str, *, verbose: bool = False) -> Resolution:
    try:
        asn = parse_asn(argument)
    except InvalidInput as exc:
        return Resolution(argument=argument, status="invalid", error=str(exc))

    try:
        name = resolver.resolve(asn, verbose=verbose)
    except InvalidInput as exc:
        return Resolution(argument=argument, asn=asn, status="invalid", error=str(exc))
    except AsnRdapError as exc:
        return Resolution(argument=argument, asn=asn, status="error", error=str(exc))

    return Resolution(
        argument=argument,
        asn=asn,
        name=name,
        status="found" if name else "no_name",
    )


def resolve_arguments(
    resolver: AsnResolver,
    arguments: Iterable[str],
    *,
    verbose: bool = False,
) -> Iterator[Resolution]:
    """Resolve arguments strictly one after another, yielding as each finishes."""

    for argument in arguments:
        yield resolve_argument(resolver, argument, verbose=verbose)
