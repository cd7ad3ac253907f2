"""Unit tests for configuration loading."""

import pytest

from repolens.config import (
    CONCEPT_FILE_EXTENSIONS,
    DOMAIN_TERMS,
    MAX_TRAVERSAL_DEPTH,
    AnalysisConfig,
    load_config,
)
from repolens.core.exceptions import ConfigError


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()

        assert config.max_depth == MAX_TRAVERSAL_DEPTH
        assert config.result_limit == 10
        assert config.concept_extensions == CONCEPT_FILE_EXTENSIONS

    def test_default_location(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".repolens").mkdir()
        (tmp_path / ".repolens" / "config.yaml").write_text("max_depth: 4\n")

        assert load_config().max_depth == 4

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("result_limit: 3\nconcept_extensions: [ts, tsx]\n")
        config = load_config(path)

        assert config.result_limit == 3
        assert config.concept_extensions == {"ts", "tsx"}

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == AnalysisConfig()

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("max_depth: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("max_depth: -1\n")

        with pytest.raises(ConfigError, match="Invalid config values"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)


def test_domain_vocabulary_is_unique():
    assert len(DOMAIN_TERMS) == len(set(DOMAIN_TERMS))
    assert "auth" in DOMAIN_TERMS
    assert "cart" in DOMAIN_TERMS
