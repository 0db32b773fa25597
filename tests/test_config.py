"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from be.config import BeConfig, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "be.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = BeConfig()
    assert cfg.require is False
    assert cfg.log_file is None
    assert cfg.verbose is False


def test_load_empty_config(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == BeConfig()


def test_load_full_config(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        require: true
        log_file: /var/log/be.log
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.require is True
    assert cfg.log_file == "/var/log/be.log"
    assert cfg.verbose is True


def test_relative_log_file_resolves_against_config_dir(tmp_yaml, tmp_path):
    cfg = load_config(tmp_yaml("log_file: logs/be.log\n"))
    assert cfg.log_file == str((tmp_path / "logs" / "be.log").resolve())


def test_log_file_expands_env(tmp_yaml, monkeypatch):
    monkeypatch.setenv("BE_LOG_DIR", "/tmp/be-logs")
    cfg = load_config(tmp_yaml("log_file: ${BE_LOG_DIR}/run.log\n"))
    assert cfg.log_file == "/tmp/be-logs/run.log"


def test_log_file_env_default(tmp_yaml, monkeypatch):
    monkeypatch.delenv("BE_LOG_DIR", raising=False)
    cfg = load_config(tmp_yaml("log_file: ${BE_LOG_DIR:-/tmp/fallback}/run.log\n"))
    assert cfg.log_file == "/tmp/fallback/run.log"


def test_log_file_missing_env_rejected(tmp_yaml, monkeypatch):
    monkeypatch.delenv("BE_MISSING_DIR", raising=False)
    with pytest.raises(ValidationError, match="BE_MISSING_DIR"):
        load_config(tmp_yaml("log_file: ${BE_MISSING_DIR}/run.log\n"))


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("strict: true\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
