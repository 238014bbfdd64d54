from asn_rdap.core.services.batch import resolve_argument, resolve_arguments
from asn_rdap.core.services.extractor import extract_name, shorten
from asn_rdap.core.services.resolver import AsnResolver, ResolverHooks, parse_asn

__all__ = [
    "AsnResolver",
    "ResolverHooks",
    "extract_name",
    "parse_asn",
    "resolve_argument",
    "resolve_arguments",
    "shorten",
]
