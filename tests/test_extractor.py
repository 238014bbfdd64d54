import pytest

from asn_rdap.core.domain.models import AutnumRecord, Entity, Remark, VCard, VCardProperty
from asn_rdap.core.services.extractor import (
    MAX_NAME_LENGTH,
    extract_name,
    org_name_from_vcard,
    shorten,
)

from ._fakes import entity, org_entity, record


def test_org_vcard_beats_titled_remark():
    """An organization vCard takes precedence over a 'description' remark."""
    rec = record(
        entities=[org_entity("Example Org")],
        remarks=[{"title": "description", "description": ["Other Text"]}],
    )

    assert extract_name(rec) == "Example Org"


def test_individual_vcard_is_rejected():
    rec = record(
        entities=[entity(["kind", {}, "text", "individual"], ["fn", {}, "text", "John Doe"])],
    )

    assert extract_name(rec) == ""


def test_individual_vcard_falls_through_to_name():
    rec = record(
        name="EXAMPLE-AS",
        entities=[entity(["kind", {}, "text", "individual"], ["fn", {}, "text", "John Doe"])],
    )

    assert extract_name(rec) == "EXAMPLE-AS"


def test_titled_remark():
    rec = record(remarks=[{"title": "description", "description": ["ACME Networks"]}])

    assert extract_name(rec) == "ACME Networks"


def test_titled_remark_preferred_over_earlier_untitled_one():
    rec = record(
        remarks=[
            {"description": ["Allocated by registry"]},
            {"title": "  Description ", "description": ["  Titled Org  ", "second line"]},
        ]
    )

    assert extract_name(rec) == "Titled Org"


def test_any_remark_used_when_no_title_matches():
    rec = record(
        remarks=[
            {"title": "description", "description": ["   "]},
            {"title": "Remarks", "description": ["", "ignored"]},
            {"title": "Notes", "description": ["Untitled Networks Ltd"]},
        ]
    )

    assert extract_name(rec) == "Untitled Networks Ltd"


def test_bare_name_field():
    rec = record(name="EXAMPLE-AS")

    assert extract_name(rec) == "EXAMPLE-AS"


def test_handle_used_when_name_blank():
    rec = record(name="   ", handle=" AS64496 ")

    assert extract_name(rec) == "AS64496"


def test_empty_record_has_no_name():
    assert extract_name(AutnumRecord()) == ""
    assert extract_name(None) == ""


def test_first_org_entity_wins():
    rec = record(
        entities=[
            {"objectClassName": "entity", "handle": "NO-VCARD"},
            entity(["kind", {}, "text", "individual"], ["fn", {}, "text", "Jane Roe"]),
            org_entity("Second Org"),
            org_entity("Third Org"),
        ]
    )

    assert extract_name(rec) == "Second Org"


def test_org_entity_without_fn_is_skipped():
    rec = record(
        entities=[
            entity(["kind", {}, "text", "org"]),
            org_entity("Named Org"),
        ]
    )

    assert extract_name(rec) == "Named Org"


@pytest.mark.parametrize("kind", ["org", "ORG", "  Org  ", "organization"])
def test_kind_matching_is_case_insensitive_substring(kind):
    rec = record(entities=[org_entity("Kind Org", kind=kind)])

    assert extract_name(rec) == "Kind Org"


def test_property_names_are_case_insensitive():
    vcard = VCard.from_jcard(["vcard", [["KIND", {}, "text", "org"], ["FN", {}, "text", "Upper Org"]]])

    assert org_name_from_vcard(vcard) == "Upper Org"


def test_any_kind_property_can_mark_organization():
    vcard = VCard.from_jcard(
        ["vcard", [["kind", {}, "text", "individual"], ["kind", {}, "text", "org"], ["fn", {}, "text", "Late Org"]]]
    )

    assert org_name_from_vcard(vcard) == "Late Org"


def test_kind_uses_last_value():
    vcard = VCard.from_jcard(["vcard", [["kind", {}, "text", "org", "individual"], ["fn", {}, "text", "Nope"]]])

    assert org_name_from_vcard(vcard) is None


def test_fn_last_non_empty_value_wins():
    vcard = VCard(
        properties=(
            VCardProperty(name="kind", value=("org",)),
            VCardProperty(name="fn", value=("First Name", "Second Name", "   ")),
        )
    )

    assert org_name_from_vcard(vcard) == "Second Name"


def test_blank_fn_property_falls_to_next_fn():
    vcard = VCard(
        properties=(
            VCardProperty(name="kind", value=("org",)),
            VCardProperty(name="fn", value=("", " ")),
            VCardProperty(name="fn", value=("Fallback Org",)),
        )
    )

    assert org_name_from_vcard(vcard) == "Fallback Org"


def test_org_name_from_missing_or_empty_vcard():
    assert org_name_from_vcard(None) is None
    assert org_name_from_vcard(VCard()) is None


def test_long_name_is_truncated_to_40_code_points():
    long_name = "Ü" * 20 + "x" * 25
    rec = record(entities=[org_entity(long_name)])

    name = extract_name(rec)

    assert len(long_name) == 45
    assert name == long_name[:40]
    assert len(name) == MAX_NAME_LENGTH
    assert not name.endswith("…")


def test_extraction_does_not_mutate_record():
    rec = AutnumRecord(
        name="  EXAMPLE-AS  ",
        entities=(Entity(vcard=VCard(properties=(VCardProperty(name="fn", value=("x",)),))),),
        remarks=(Remark(title="Remarks", description=(" Some text ",)),),
    )
    before = rec.model_dump()

    assert extract_name(rec) == "Some text"
    assert rec.model_dump() == before


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  Example Org  ", "Example Org"),
        ("", ""),
        ("   ", ""),
        ("a" * 40, "a" * 40),
        ("b" * 45, "b" * 40),
        ("  " + "c" * 50, "c" * 40),
    ],
)
def test_shorten(text, expected):
    assert shorten(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "  padded  ",
        "x" * 39 + " " + "tail after the cut",
        " " * 3 + "y" * 60,
        "名" * 41,
        "Example Org\t\n",
    ],
)
def test_shorten_is_idempotent(text):
    once = shorten(text)

    assert shorten(once) == once
    assert len(once) <= MAX_NAME_LENGTH
