"""Unit tests for build configuration."""

import tempfile
from pathlib import Path

import pytest
from bootpack.config import BuildConfig, ConfigError, load_config


class TestBuildConfig:
    def test_defaults(self):
        config = load_config(environ={})
        assert config.max_workers == 8
        assert config.debug is False
        assert config.log_file is None

    def test_from_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bootpack.yml"
            path.write_text("max_workers: 2\ndebug: true\nlog_file: build.jsonl\n")
            config = load_config(path, environ={})
        assert config.max_workers == 2
        assert config.debug is True
        assert config.log_file == "build.jsonl"

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bootpack.yml"
            path.write_text("")
            assert load_config(path, environ={}).max_workers == 8

    def test_environment_overrides(self):
        config = load_config(environ={"BP_SCAN_WORKERS": "3", "BP_DEBUG": "true"})
        assert config.max_workers == 3
        assert config.debug is True

    def test_invalid_worker_count(self):
        with pytest.raises(ConfigError):
            load_config(environ={"BP_SCAN_WORKERS": "0"})
        with pytest.raises(ConfigError):
            load_config(environ={"BP_SCAN_WORKERS": "many"})

    def test_quoted_false_in_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bootpack.yml"
            path.write_text("debug: \"false\"\n")
            assert load_config(path, environ={}).debug is False

    def test_invalid_debug_value(self):
        with pytest.raises(ConfigError):
            BuildConfig.from_dict({"debug": "sometimes"})
        with pytest.raises(ConfigError):
            load_config(environ={"BP_DEBUG": "maybe"})

    def test_unknown_key(self):
        with pytest.raises(ConfigError):
            BuildConfig.from_dict({"workers": 4})

    def test_non_mapping_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bootpack.yml"
            path.write_text("- 1\n- 2\n")
            with pytest.raises(ConfigError):
                load_config(path, environ={})

    def test_to_dict(self):
        assert BuildConfig(max_workers=4).to_dict() == {"max_workers": 4, "log_file": None, "debug": False}
