import importlib

import pytest

import nztm.common


@pytest.fixture()
def reload_common(monkeypatch):
    yield lambda: importlib.reload(nztm.common)
    monkeypatch.delenv("TM_ENVELOPE", raising=False)
    importlib.reload(nztm.common)


def test_default_envelope(reload_common, monkeypatch):
    monkeypatch.delenv("TM_ENVELOPE", raising=False)
    assert reload_common().tmEnvelope == 3.0


def test_envelope_from_environment(reload_common, monkeypatch):
    monkeypatch.setenv("TM_ENVELOPE", "4.5")
    assert reload_common().tmEnvelope == 4.5


def test_invalid_envelope(reload_common, monkeypatch):
    monkeypatch.setenv("TM_ENVELOPE", "wide")
    with pytest.raises(ValueError):
        reload_common()
