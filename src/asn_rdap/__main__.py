"""Permite `python -m asn_rdap ...`."""

from __future__ import annotations

from asn_rdap.cli.main import run

if __name__ == "__main__":
    run()
