import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from asn_rdap.cli import main as cli_main
from asn_rdap.cli.ui_components import format_resolution
from asn_rdap.core.domain.models import Resolution
from asn_rdap.core.errors import RDAPNotFound

from ._fakes import FakeRDAPClient, record

runner = CliRunner()


@pytest.fixture
def registry(monkeypatch, example_record):
    client = FakeRDAPClient(
        {
            "AS13335": example_record,
            "AS64496": record(handle="AS64496"),
            "AS64497": record(),
            "AS64498": RDAPNotFound("not found: AS64498"),
            "64498": RDAPNotFound("not found: 64498"),
        }
    )
    monkeypatch.setattr(cli_main, "HttpRDAPClient", lambda settings: client)
    # Sin colores aunque el entorno fuerce FORCE_COLOR.
    monkeypatch.setattr(cli_main, "_console", Console(force_terminal=False, no_color=True))
    return client


def test_no_arguments_is_a_usage_error(registry):
    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 2
    assert "Usage" in result.output
    assert registry.calls == []


def test_one_line_per_argument(registry):
    result = runner.invoke(cli_main.app, ["13335", "64512", "abc", "0", "64496", "64497", "64498"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "AS13335: Example Org",
        "AS64512: Private ASN",
        "abc: invalid ASN: not a decimal integer: 'abc'",
        "AS0: error: invalid ASN: 0",
        "AS64496: AS64496",
        "AS64497: (no name found)",
        "AS64498: error: not found: 64498",
    ]
    assert registry.calls == ["AS13335", "AS64496", "AS64497", "AS64498", "64498"]


def test_verbose_prints_raw_record_before_name(registry):
    result = runner.invoke(cli_main.app, ["-v", "13335"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "RDAP autnum for AS13335:"
    assert lines[-1] == "AS13335: Example Org"
    assert json.loads("\n".join(lines[1:-1]))["name"] == "CLOUDFLARENET"


def test_output_writes_json_export(registry, tmp_path):
    out = tmp_path / "exports" / "results.json"

    result = runner.invoke(cli_main.app, ["--output", str(out), "13335", "x1", "64497"])

    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [d["status"] for d in data] == ["found", "invalid", "no_name"]
    assert data[0] == {
        "argument": "13335",
        "asn": 13335,
        "error": None,
        "name": "Example Org",
        "status": "found",
    }
    assert data[1]["asn"] is None


@pytest.mark.parametrize(
    "resolution, line",
    [
        (Resolution(argument="1", asn=1, name="Level 3", status="found"), "AS1: Level 3"),
        (Resolution(argument="2", asn=2, status="no_name"), "AS2: (no name found)"),
        (Resolution(argument="3", asn=3, status="error", error="boom"), "AS3: error: boom"),
        (Resolution(argument="q", status="invalid", error="bad"), "q: invalid ASN: bad"),
    ],
)
def test_format_resolution(resolution, line):
    assert format_resolution(resolution) == line


def test_negative_asn_after_first_argument_is_reported(registry):
    result = runner.invoke(cli_main.app, ["13335", "-1"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "AS13335: Example Org",
        "AS-1: error: invalid ASN: -1",
    ]


def test_flags_after_first_asn_are_arguments(registry):
    result = runner.invoke(cli_main.app, ["64512", "-v"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "AS64512: Private ASN",
        "-v: invalid ASN: not a decimal integer: '-v'",
    ]


def test_huge_number_does_not_stop_the_batch(registry):
    huge = "9" * 5000

    result = runner.invoke(cli_main.app, [huge, "13335"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"{huge}: invalid ASN: value out of range: '{huge}'",
        "AS13335: Example Org",
    ]
