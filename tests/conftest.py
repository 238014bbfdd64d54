import pytest

from ._fakes import FakeRDAPClient, org_entity, record


@pytest.fixture
def fake_client():
    """Cliente vacío: todas las consultas devuelven None."""
    return FakeRDAPClient()


@pytest.fixture
def example_record():
    return record(
        handle="AS13335",
        name="CLOUDFLARENET",
        startAutnum=13335,
        endAutnum=13335,
        entities=[org_entity("Example Org")],
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Sin .env ni variables del usuario durante los tests.
    monkeypatch.chdir(tmp_path)
    for var in ("ASN_RDAP_HTTP_TIMEOUT_SECONDS", "ASN_RDAP_USER_AGENT", "ASN_RDAP_BOOTSTRAP_URL", "ASN_RDAP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
