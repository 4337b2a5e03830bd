from __future__ import annotations

import json

import pytest

from contentplanner.config import load_settings
from contentplanner.ssm import ParameterStore


class FakeSSM:
    def __init__(self, values: dict[str, str]) -> None:
        self.values = values
        self.requests: list[tuple[str, bool]] = []

    def get_parameter(self, Name: str, WithDecryption: bool):
        self.requests.append((Name, WithDecryption))
        if Name not in self.values:
            raise KeyError(Name)
        return {"Parameter": {"Value": self.values[Name]}}


@pytest.fixture
def fake_ssm() -> FakeSSM:
    return FakeSSM({"/planner/openai-key": "sk-from-ssm"})


def test_parameters_are_decrypted_and_cached(fake_ssm):
    store = ParameterStore(fake_ssm)
    assert store.get("/planner/openai-key") == "sk-from-ssm"
    assert store.get("/planner/openai-key") == "sk-from-ssm"
    assert fake_ssm.requests == [("/planner/openai-key", True)]


def test_lookup_failure_propagates(fake_ssm):
    with pytest.raises(KeyError):
        ParameterStore(fake_ssm).get("/missing")


def test_empty_parameter_name_is_rejected(fake_ssm):
    with pytest.raises(ValueError):
        ParameterStore(fake_ssm).get("")


def test_load_settings_takes_credential_from_ssm(monkeypatch, fake_ssm):
    monkeypatch.setenv("OPENAI_API_KEY_PARAMETER", "/planner/openai-key")

    settings = load_settings(store=ParameterStore(fake_ssm))

    assert settings.api_key == "sk-from-ssm"
    assert settings.api_key_parameter == "/planner/openai-key"


def test_load_settings_uses_parameter_from_config_file(tmp_path, fake_ssm):
    path = tmp_path / "planner.json"
    path.write_text(json.dumps({"api_key_parameter": "/planner/openai-key"}), encoding="utf-8")

    settings = load_settings(path, store=ParameterStore(fake_ssm))

    assert settings.api_key == "sk-from-ssm"
    assert fake_ssm.requests == [("/planner/openai-key", True)]


def test_configured_key_skips_ssm(monkeypatch, fake_ssm):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-local")
    monkeypatch.setenv("OPENAI_API_KEY_PARAMETER", "/planner/openai-key")

    settings = load_settings(store=ParameterStore(fake_ssm))

    assert settings.api_key == "sk-local"
    assert fake_ssm.requests == []
