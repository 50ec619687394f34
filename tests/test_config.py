# tests/test_config.py
"""
Tests for layered configuration loading.
"""

import pytest

from docchunk.config import DocChunkConfig, deep_merge, load_config
from docchunk.exceptions import ConfigurationError


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_nested_dicts_merge(self):
        assert deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}}) == {
            "a": 1,
            "b": {"c": 10, "d": 3},
        }

    def test_lists_replace(self):
        assert deep_merge({"s": [1, 2]}, {"s": [3]}) == {"s": [3]}

    def test_base_not_mutated(self):
        base = {"b": {"c": 2}}
        deep_merge(base, {"b": {"c": 3}})
        assert base == {"b": {"c": 2}}


class TestLoadConfig:
    """Tests for load_config."""

    def test_package_defaults(self):
        config = load_config()

        assert isinstance(config, DocChunkConfig)
        assert config.recursive.chunk_size == 500
        assert config.recursive.chunk_overlap == 100
        assert config.recursive.separators == ["\n\n", "\n", ".", " "]
        assert config.fixed_size.chunk_size == 500
        assert config.fixed_size.overlap == 100
        assert config.sentences.max_sentences_per_chunk == 3
        assert config.tokens.max_tokens_per_chunk == 100
        assert config.enrichment.method == "RecursiveCharacterSplit"

    def test_defaults_match_schema_defaults(self):
        assert load_config() == DocChunkConfig()

    def test_user_overrides(self, tmp_path):
        path = tmp_path / "chunking.yaml"
        path.write_text("recursive:\n  chunk_size: 800\nenrichment:\n  method: tokens\n")

        config = load_config(path)

        assert config.recursive.chunk_size == 800
        assert config.recursive.chunk_overlap == 100
        assert config.enrichment.method == "tokens"

    def test_separators_replaced_not_merged(self, tmp_path):
        path = tmp_path / "chunking.yaml"
        path.write_text('recursive:\n  separators: ["\\n", " "]\n')

        assert load_config(path).recursive.separators == ["\n", " "]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("recursive:\n  chunk_size: 0\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("recursive:\n  chunk_sise: 10\n")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_empty_separators_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("recursive:\n  separators: []\n")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("recursive: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Could not read"):
            load_config(path)
