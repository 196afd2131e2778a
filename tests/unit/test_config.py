"""Tests for config module."""

from pathlib import Path

import pytest
import yaml

from bloomsieve.config import (
    Config,
    RuntimeConfig,
    SearchConfig,
    build_config,
    load_config,
    save_config,
)
from bloomsieve.correction.parameters import Shape
from bloomsieve.exceptions import ConfigurationError
from bloomsieve.resources import get_default_config


class TestRuntimeConfig:
    """Test cases for RuntimeConfig."""

    def test_runtime_config_defaults(self):
        config = RuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.log_file is None


class TestSearchConfig:
    """Test cases for SearchConfig."""

    def test_search_config_defaults(self):
        config = SearchConfig()
        assert config.pattern_size == 100
        assert config.window_size == 23
        assert config.kmer_size == 19
        assert config.shape is None
        assert config.fpr == 0.05
        assert config.p_max == 0.15
        assert config.threshold is None
        assert config.cache_thresholds is True

    def test_resolve_shape_from_kmer(self):
        assert SearchConfig(kmer_size=5).resolve_shape() == Shape("11111")

    def test_shape_wins_over_kmer(self):
        assert SearchConfig(kmer_size=5, shape="101").resolve_shape() == Shape("101")


class TestConfig:
    """Test cases for main Config class."""

    def test_validate_requires_index(self):
        with pytest.raises(ConfigurationError, match="Index file is required"):
            Config().validate()

    def test_validate_rejects_bad_probability(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index", search=SearchConfig(fpr=1.5))
        with pytest.raises(ConfigurationError, match="search.fpr"):
            cfg.validate()

    def test_validate_rejects_non_integer_sizes(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index", search=SearchConfig(pattern_size="50"))
        with pytest.raises(ConfigurationError, match="search.pattern_size"):
            cfg.validate()

    def test_validate_rejects_bad_shape(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index", search=SearchConfig(shape="0110"))
        with pytest.raises(ConfigurationError, match="search.shape"):
            cfg.validate()

    def test_to_parameters(self, tmp_path):
        cfg = Config(
            index_file=tmp_path / "x.index",
            search=SearchConfig(pattern_size=50, window_size=23, kmer_size=19, fpr=0.05, p_max=0.01),
        )
        params = cfg.to_parameters()
        assert params.pattern_size == 50
        assert params.shape == Shape("1" * 19)
        assert params.index_file == tmp_path / "x.index"
        assert params.threshold_was_set is False
        assert params.cache_thresholds is True

    def test_threshold_sets_manual_flag(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index", search=SearchConfig(threshold=0.7))
        assert cfg.to_parameters().threshold_was_set is True

    def test_to_dict_converts_paths(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index")
        data = cfg.to_dict()
        assert data["index_file"] == str(tmp_path / "x.index")
        assert data["search"]["window_size"] == 23


class TestLoadConfig:
    """Test cases for YAML loading and saving."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.dump(
                {
                    "index_file": "idx/raptor.index",
                    "search": {"pattern_size": 50, "shape": "11011", "p_max": 0.01},
                    "runtime": {"log_level": "INFO", "log_file": "logs/run.log"},
                }
            )
        )
        cfg = load_config(path)
        assert cfg.index_file == Path("idx/raptor.index")
        assert cfg.search.pattern_size == 50
        assert cfg.search.shape == "11011"
        assert cfg.search.p_max == 0.01
        assert cfg.search.window_size == 23
        assert cfg.runtime.log_level == "INFO"
        assert cfg.runtime.log_file == Path("logs/run.log")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        cfg = load_config(path)
        assert cfg.index_file is None
        assert cfg.search == SearchConfig()

    def test_unknown_top_level_key(self):
        with pytest.raises(ConfigurationError, match="Unsupported config option"):
            build_config({"reference": "ref.fa"})

    def test_unknown_section_key(self):
        with pytest.raises(ConfigurationError, match="search.bogus"):
            build_config({"search": {"bogus": 1}})

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search: [unclosed")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(path)

    def test_save_and_reload(self, tmp_path):
        cfg = Config(index_file=tmp_path / "x.index", search=SearchConfig(fpr=0.02))
        path = tmp_path / "saved.yaml"
        save_config(cfg, path)
        reloaded = load_config(path)
        assert reloaded.index_file == cfg.index_file
        assert reloaded.search == cfg.search

    def test_default_template_loads(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(get_default_config())
        cfg = load_config(path)
        assert cfg.search == SearchConfig()
        assert cfg.runtime == RuntimeConfig()


class TestConfigValueTypes:
    """Values of the wrong type are configuration errors, not crashes."""

    def _config(self, tmp_path, search=None, runtime=None):
        data = {"index_file": str(tmp_path / "x.index")}
        if search:
            data["search"] = search
        if runtime:
            data["runtime"] = runtime
        return build_config(data)

    @pytest.mark.parametrize("threshold", ["abc", True, [0.5], 1.5, -0.1])
    def test_invalid_threshold(self, tmp_path, threshold):
        cfg = self._config(tmp_path, search={"threshold": threshold})
        with pytest.raises(ConfigurationError, match="search.threshold"):
            cfg.validate()

    def test_integer_threshold_accepted(self, tmp_path):
        cfg = self._config(tmp_path, search={"threshold": 1})
        assert cfg.to_parameters().threshold_was_set is True

    @pytest.mark.parametrize("value", ["no", 0, None])
    def test_invalid_cache_thresholds(self, tmp_path, value):
        cfg = self._config(tmp_path, search={"cache_thresholds": value})
        with pytest.raises(ConfigurationError, match="search.cache_thresholds"):
            cfg.validate()

    @pytest.mark.parametrize("name", ["fpr", "p_max"])
    def test_boolean_probability_rejected(self, tmp_path, name):
        cfg = self._config(tmp_path, search={name: True})
        with pytest.raises(ConfigurationError, match=f"search.{name}"):
            cfg.validate()

    @pytest.mark.parametrize("level", ["LOUD", 10, None])
    def test_invalid_log_level(self, tmp_path, level):
        cfg = self._config(tmp_path, runtime={"log_level": level})
        with pytest.raises(ConfigurationError, match="runtime.log_level"):
            cfg.validate()

    def test_lowercase_log_level_accepted(self, tmp_path):
        self._config(tmp_path, runtime={"log_level": "debug"}).validate()

    def test_unquoted_shape_accepted(self, tmp_path):
        """YAML reads an unquoted 11011 as an integer."""
        cfg = self._config(tmp_path, search={"shape": 11011})
        assert cfg.to_parameters().shape == Shape("11011")
