"""
Tests for rangekit/config.py configuration management.

Tests the hierarchical configuration system with sensible defaults,
including file loading, environment variables and saving.
"""
from pathlib import Path

import pytest
import tomli

from rangekit import ranges as rk
from rangekit.config import (
    RangekitConfig,
    current_config,
    get_config,
    init_config,
    reset_config,
)
from rangekit.ranges import ExhaustedRangeError, UnreliableComparisonWarning


class TestRangekitConfigDefaults:
    """Test default configuration values."""

    def test_default_access_is_lenient(self):
        """Reading an empty range returns None by default."""
        assert RangekitConfig().strict_access is False

    def test_default_warns_on_unreliable_comparison(self):
        """find() warns about non-primitive targets by default."""
        assert RangekitConfig().warn_unreliable_comparison is True

    def test_default_display(self):
        """CLI shows 20 elements as a table by default."""
        config = RangekitConfig()
        assert config.display_limit == 20
        assert config.output_format == "table"
        assert config.views_file is None

    def test_default_log_level(self):
        """Logging defaults to WARNING."""
        assert RangekitConfig().log_level == "WARNING"


class TestRangekitConfigLoading:
    """Test loading from files and environment."""

    def test_load_without_files_gives_defaults(self):
        """No config files means defaults."""
        assert RangekitConfig.load() == RangekitConfig()

    def test_user_config(self):
        """~/.config/rangekit/config.toml is read."""
        path = Path.home() / ".config" / "rangekit" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text("display_limit = 5\n")

        assert RangekitConfig.load().display_limit == 5

    def test_local_config_overrides_user(self):
        """./rangekit.toml wins over the user config."""
        user = Path.home() / ".config" / "rangekit" / "config.toml"
        user.parent.mkdir(parents=True)
        user.write_text("display_limit = 5\noutput_format = \"json\"\n")
        Path("rangekit.toml").write_text("display_limit = 7\n")

        config = RangekitConfig.load()
        assert config.display_limit == 7
        assert config.output_format == "json"

    def test_explicit_file(self, tmp_path):
        """An explicit config file is applied after the searched ones."""
        Path("rangekit.toml").write_text("strict_access = false\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("strict_access = true\n")

        assert RangekitConfig.load(explicit).strict_access is True

    def test_unknown_keys_ignored(self):
        """Keys that are not settings are ignored."""
        Path("rangekit.toml").write_text("nonsense = 1\n")
        assert not hasattr(RangekitConfig.load(), "nonsense")

    def test_env_vars(self, monkeypatch):
        """RANGEKIT_* variables override files with type coercion."""
        Path("rangekit.toml").write_text("display_limit = 7\n")
        monkeypatch.setenv("RANGEKIT_DISPLAY_LIMIT", "3")
        monkeypatch.setenv("RANGEKIT_STRICT_ACCESS", "yes")
        monkeypatch.setenv("RANGEKIT_LOG_LEVEL", "DEBUG")

        config = RangekitConfig.load()
        assert config.display_limit == 3
        assert config.strict_access is True
        assert config.log_level == "DEBUG"

    def test_views_file_expanded(self):
        """~ in views_file is expanded."""
        Path("rangekit.toml").write_text('views_file = "~/ranges.yaml"\n')
        assert RangekitConfig.load().views_file == str(Path.home() / "ranges.yaml")


class TestRangekitConfigSave:
    """Test saving configuration."""

    def test_save_round_trip(self, tmp_path):
        """Saved settings load back unchanged."""
        config = RangekitConfig(display_limit=9, strict_access=True)
        path = tmp_path / "out" / "config.toml"
        config.save(path)

        assert RangekitConfig.load(path) == config

    def test_save_skips_unset_optional(self, tmp_path):
        """None values are not written (TOML has no null)."""
        path = tmp_path / "config.toml"
        RangekitConfig().save(path)

        with open(path, "rb") as f:
            data = tomli.load(f)
        assert "views_file" not in data

    def test_save_defaults_to_user_config(self):
        """Without a path, the user config file is written."""
        RangekitConfig(display_limit=2).save()
        assert (Path.home() / ".config" / "rangekit" / "config.toml").exists()


class TestGlobalConfig:
    """Test the process-wide configuration instance."""

    def test_get_config_is_cached(self):
        """get_config() returns the same instance until reloaded."""
        assert get_config() is get_config()
        first = get_config()
        assert get_config(reload=True) is not first

    def test_init_config_applies_overrides(self):
        """init_config() sets non-None overrides only."""
        config = init_config(display_limit=4, output_format=None, unknown=1)
        assert config.display_limit == 4
        assert config.output_format == "table"
        assert get_config() is config

    def test_reset_config(self):
        """reset_config() forces a reload on next access."""
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_current_config_does_not_load_files(self):
        """Before anything loads config, current_config() is plain defaults."""
        Path("rangekit.toml").write_text("strict_access = true\n")
        assert current_config() == RangekitConfig()
        assert get_config().strict_access is True
        assert current_config() is get_config()


class TestRangeCoreConfig:
    """The range core only sees configuration that was explicitly loaded."""

    def test_local_file_ignored_until_loaded(self):
        """A rangekit.toml in cwd does not change empty access on its own."""
        Path("rangekit.toml").write_text("strict_access = true\n")
        assert rk.over([]).front() is None

        get_config()
        with pytest.raises(ExhaustedRangeError):
            rk.over([]).front()

    def test_init_config_reaches_the_core(self):
        """Overrides set through init_config() apply to ranges."""
        init_config(strict_access=True)
        with pytest.raises(ExhaustedRangeError):
            rk.over([]).back()

    def test_find_warning_ignores_unloaded_file(self):
        """find() warns by default even if a local file disables it."""
        Path("rangekit.toml").write_text("warn_unreliable_comparison = false\n")
        with pytest.warns(UnreliableComparisonWarning):
            rk.find(rk.over([[1], [2]]), [2])
