"""Tests for config validation."""

import pytest

from resume_match.config import load_config


class TestConfigValidation:
    def test_invalid_report_mode(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report:\n  default_mode: verbose\n")
        with pytest.raises(ValueError, match="default_mode"):
            load_config(yaml)

    def test_invalid_max_retries(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  max_retries: 99\n")
        with pytest.raises(ValueError, match="max_retries"):
            load_config(yaml)

    def test_invalid_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_temperature(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 1.5\n")
        with pytest.raises(ValueError, match="temperature"):
            load_config(yaml)

    def test_invalid_fetch_timeout(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("fetch:\n  timeout_ms: 10\n")
        with pytest.raises(ValueError, match="timeout_ms"):
            load_config(yaml)

    def test_negative_settle(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("fetch:\n  settle_ms: -1\n")
        with pytest.raises(ValueError, match="settle_ms"):
            load_config(yaml)

    def test_unknown_key_rejected(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  haiku_model: x\n")
        with pytest.raises(TypeError):
            load_config(yaml)
