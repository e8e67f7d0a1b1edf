import pytest

from modexport import ExportBuilder


ENV_VARS = ("MODEXPORT_STRICT", "MODEXPORT_TRACE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so the variable is removed again on teardown even if a test loads a .env file
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def exporter():
    return ExportBuilder()
