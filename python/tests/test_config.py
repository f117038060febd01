"""Tests for the config module."""

import json

import pytest

from radixword import config as cfg


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the loader at a config.json in a temp directory."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(cfg, "_find_config", lambda: path)
    return path


class TestLoad:
    """Tests for loading configuration."""

    def test_fallback_without_file(self, monkeypatch):
        """Test hardcoded defaults when no config.json exists."""
        monkeypatch.setattr(cfg, "_find_config", lambda: None)
        assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}
        assert cfg.default_alphabet() == "base62"
        assert cfg.default_width() == 64
        assert cfg.default_verbose() is False

    def test_reads_file(self, config_file):
        """Test values come from config.json."""
        config_file.write_text(json.dumps({"defaults": {"alphabet": "base36", "width": 32}}))
        assert cfg.default_alphabet() == "base36"
        assert cfg.default_width() == 32

    def test_missing_key_falls_back(self, config_file):
        """Test keys absent from the file use the fallback."""
        config_file.write_text(json.dumps({"defaults": {"alphabet": "base2"}}))
        assert cfg.default_width() == 64
        assert cfg.get_default("nope", "x") == "x"

    def test_malformed_file(self, config_file):
        """Test unreadable JSON falls back to defaults."""
        config_file.write_text("{not json")
        assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}

    def test_cached(self, config_file):
        """Test config is read once until reset."""
        config_file.write_text(json.dumps({"defaults": {"alphabet": "base8"}}))
        first = cfg.load()
        config_file.write_text(json.dumps({"defaults": {"alphabet": "base10"}}))
        assert cfg.load() is first
        cfg.reset()
        assert cfg.default_alphabet() == "base10"

    @pytest.mark.parametrize("content", ["[1, 2]", '{"defaults": []}', '"base2"'])
    def test_wrong_shape_falls_back(self, config_file, content):
        """Test JSON that isn't a defaults mapping falls back to defaults."""
        config_file.write_text(content)
        assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}
        assert cfg.default_alphabet() == "base62"

    def test_fallback_is_a_copy(self, monkeypatch):
        """Test mutating loaded defaults leaves the fallback intact."""
        monkeypatch.setattr(cfg, "_find_config", lambda: None)
        cfg.load()["defaults"]["alphabet"] = "base2"
        assert cfg.FALLBACK_DEFAULTS["alphabet"] == "base62"
        cfg.reset()
        assert cfg.default_alphabet() == "base62"
