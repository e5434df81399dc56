"""Layered configuration: defaults, config file, environment, overrides."""
from __future__ import annotations

import json

from deepseek_client.config import DEFAULTS, get_client_config, get_model
from deepseek_client.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    is_placeholder,
    read_env_field,
    resolve_api_key,
)


def test_defaults():
    cfg = get_client_config()
    assert cfg["base_url"] == "https://api.deepseek.com"
    assert cfg["model"] == "deepseek-chat"
    assert cfg["timeout"] == 60.0
    assert cfg["stream_queue_size"] == 64
    assert "api_key" not in cfg
    assert get_model() == "deepseek-chat"


def test_env_map_and_aliases():
    assert ENV_MAP["api_key"] == "DEEPSEEK_API_KEY"
    assert list(get_env_var_candidates("base_url")) == ["DEEPSEEK_BASE_URL", "DEEPSEEK_API_BASE"]
    assert "base_url" in ENV_ALIASES


def test_alias_is_used_when_canonical_missing(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_BASE", "https://alias.local")
    assert read_env_field("base_url") == ("https://alias.local", "DEEPSEEK_API_BASE")
    assert get_client_config()["base_url"] == "https://alias.local"


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("sk-real-value")
    assert not is_placeholder(None)


def test_resolve_api_key_ignores_placeholders(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "changeme")
    assert resolve_api_key() == (None, None)
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-live")
    assert resolve_api_key() == ("sk-live", "DEEPSEEK_API_KEY")


def test_yaml_file_section_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "deepseek.yaml"
    path.write_text(
        "deepseek:\n"
        "  model: deepseek-reasoner\n"
        "  timeout: 30\n"
        "  base_url: https://file.local\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DEEPSEEK_CONFIG_FILE", str(path))
    monkeypatch.setenv("DEEPSEEK_BASE_URL", "https://env.local")
    cfg = get_client_config({"timeout": 5, "model": None})
    assert cfg["model"] == "deepseek-reasoner"  # file; None override ignored
    assert cfg["base_url"] == "https://env.local"  # env beats file
    assert cfg["timeout"] == 5.0  # override beats file


def test_json_file_without_section(monkeypatch, tmp_path):
    path = tmp_path / "deepseek.json"
    path.write_text(json.dumps({"stream_queue_size": 8, "api_key": "sk-file"}), encoding="utf-8")
    monkeypatch.setenv("DEEPSEEK_CONFIG_FILE", str(path))
    cfg = get_client_config()
    assert cfg["stream_queue_size"] == 8
    assert cfg["api_key"] == "sk-file"


def test_missing_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("DEEPSEEK_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_client_config()["model"] == DEFAULTS["model"]


def test_invalid_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_TIMEOUT", "soon")
    monkeypatch.setenv("DEEPSEEK_STREAM_QUEUE_SIZE", "-3")
    cfg = get_client_config()
    assert cfg["timeout"] == DEFAULTS["timeout"]
    assert cfg["stream_queue_size"] == DEFAULTS["stream_queue_size"]


def test_placeholder_override_key_is_dropped():
    cfg = get_client_config({"api_key": "placeholder"})
    assert "api_key" not in cfg
