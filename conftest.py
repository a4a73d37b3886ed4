import pytest


@pytest.fixture(autouse=True)
def clean_gateway_env(monkeypatch):
    """Tests configure the relay's gateway explicitly; never inherit it from the shell."""
    monkeypatch.delenv("GATEWAY_URL", raising=False)
    monkeypatch.delenv("GATEWAY_TIMEOUT", raising=False)
