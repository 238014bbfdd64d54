"""Extraction of a display name from an RDAP autnum record.

Registries disagree on where the organization name lives: RIPE and ARIN
publish an entity whose vCard has `kind: org`, APNIC tends to put it in a
remark titled "description", and some only fill `name`/`handle` with an
allocation label. Each convention is a tier below; the tiers run in order
and the first one that yields text wins.
"""

from __future__ import annotations

from typing import Callable, Optional

from asn_rdap.core.domain.models import AutnumRecord, Remark, VCard

MAX_NAME_LENGTH = 40

NameTier = Callable[[AutnumRecord], Optional[str]]


def shorten(text: str, limit: int = MAX_NAME_LENGTH) -> str:
    """Trim `text` and cut it to at most `limit` code points.

    No ellipsis is added. The result never has surrounding whitespace, so
    applying it twice gives the same string; a cut that lands on whitespace
    therefore yields fewer than `limit` code points.
    """

    text = text.strip()
    if len(text) > limit:
        text = text[:limit].rstrip()
    return text


def _is_organization(vcard: VCard) -> bool:
    for prop in vcard.get("kind"):
        values = prop.values()
        if values and "org" in values[-1].strip().lower():
            return True
    return False


def org_name_from_vcard(vcard: VCard | None) -> str | None:
    """Formatted name (`fn`) of a vCard whose `kind` marks an organization."""

    if vcard is None or not vcard.properties:
        return None
    if not _is_organization(vcard):
        return None

    for prop in vcard.get("fn"):
        # Last non-empty value of the property wins.
        for value in reversed(prop.values()):
            value = value.strip()
            if value:
                return value
    return None


def _first_line(remark: Remark) -> str | None:
    if not remark.description:
        return None
    return remark.description[0].strip() or None


def name_from_org_entity(record: AutnumRecord) -> str | None:
    for entity in record.entities:
        name = org_name_from_vcard(entity.vcard)
        if name:
            return name
    return None


def name_from_described_remark(record: AutnumRecord) -> str | None:
    for remark in record.remarks:
        if (remark.title or "").strip().lower() != "description":
            continue
        line = _first_line(remark)
        if line:
            return line
    return None


def name_from_any_remark(record: AutnumRecord) -> str | None:
    for remark in record.remarks:
        line = _first_line(remark)
        if line:
            return line
    return None


def name_from_bare_fields(record: AutnumRecord) -> str | None:
    for value in (record.name, record.handle):
        if value and value.strip():
            return value.strip()
    return None


NAME_TIERS: tuple[NameTier, ...] = (
    name_from_org_entity,
    name_from_described_remark,
    name_from_any_remark,
    name_from_bare_fields,
)


def extract_name(record: AutnumRecord | None) -> str:
    """Best-effort organization name for `record`, or "" when none is found."""

    if record is None:
        return ""
    for tier in NAME_TIERS:
        name = tier(record)
        if name:
            return shorten(name)
    return ""
