"""
Configuration management for rangekit.

Provides a small hierarchical configuration system with sensible defaults.
Supports both global (~/.config/rangekit/config.toml) and local (rangekit.toml) configurations.
"""
import os
import tomli
import tomli_w
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict


@dataclass
class RangekitConfig:
    """
    rangekit configuration with sensible defaults.

    Configuration hierarchy (highest to lowest priority):
    1. Command-line arguments
    2. Environment variables (RANGEKIT_*)
    3. Explicit config file
    4. Local config file (./rangekit.toml or ./.rangekitrc)
    5. User config file (~/.config/rangekit/config.toml)
    6. System defaults
    """

    # Range behavior
    strict_access: bool = field(default=False)  # front()/back() on an empty range raise instead of returning None
    warn_unreliable_comparison: bool = field(default=True)

    # Display settings
    output_format: str = field(default="table")  # table, json, plain
    display_limit: int = field(default=20)  # elements shown per range by the CLI
    views_file: Optional[str] = field(default=None)

    # Advanced
    log_level: str = field(default="WARNING")

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "RangekitConfig":
        """
        Load configuration from files and environment.

        Args:
            config_file: Specific config file to load (applied after the searched ones)

        Returns:
            Merged configuration object
        """
        config = cls()

        user_config_path = Path.home() / ".config" / "rangekit" / "config.toml"
        if user_config_path.exists():
            config._merge(cls._load_toml(user_config_path))

        local_paths = [
            Path.cwd() / "rangekit.toml",
            Path.cwd() / ".rangekitrc",
        ]

        for path in local_paths:
            if path.exists():
                config._merge(cls._load_toml(path))
                break

        if config_file and Path(config_file).exists():
            config._merge(cls._load_toml(Path(config_file)))

        config._apply_env_vars()

        if config.views_file:
            config.views_file = os.path.expanduser(os.path.expandvars(config.views_file))

        return config

    @staticmethod
    def _load_toml(path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        with open(path, "rb") as f:
            return tomli.load(f)

    def _merge(self, data: Dict[str, Any]):
        """Merge configuration data into this instance."""
        for key, value in data.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def _apply_env_vars(self):
        """Apply environment variables with RANGEKIT_ prefix."""
        prefix = "RANGEKIT_"
        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()
                if hasattr(self, config_key):
                    current_value = getattr(self, config_key)
                    if isinstance(current_value, bool):
                        setattr(self, config_key, value.lower() in ("true", "1", "yes"))
                    elif isinstance(current_value, int):
                        setattr(self, config_key, int(value))
                    else:
                        setattr(self, config_key, value)

    def save(self, path: Optional[Path] = None):
        """
        Save current configuration to TOML file.

        Args:
            path: Path to save to (defaults to user config)
        """
        if path is None:
            path = Path.home() / ".config" / "rangekit" / "config.toml"

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # TOML has no null; unset optional fields are left out
        data = {key: value for key, value in asdict(self).items() if value is not None}
        with open(path, "wb") as f:
            tomli_w.dump(data, f)


# Global configuration instance
_config: Optional[RangekitConfig] = None


def get_config(reload: bool = False, config_file: Optional[Path] = None) -> RangekitConfig:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload configuration from files
        config_file: Specific config file to load

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None or reload:
        _config = RangekitConfig.load(config_file)
    return _config


def current_config() -> RangekitConfig:
    """
    Configuration the range core consults, without touching files.

    Returns the global instance once get_config() or init_config() has
    loaded it; until then, plain defaults.
    """
    if _config is None:
        return RangekitConfig()
    return _config


def init_config(**kwargs) -> RangekitConfig:
    """
    Initialize configuration with command-line overrides.

    Args:
        **kwargs: Configuration overrides; None values are ignored

    Returns:
        Configured instance
    """
    config = get_config()

    for key, value in kwargs.items():
        if hasattr(config, key) and value is not None:
            setattr(config, key, value)

    return config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() reloads it."""
    global _config
    _config = None
