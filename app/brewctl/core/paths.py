"""XDG-compliant path management for brewctl.

brewctl keeps no state of its own, so only the configuration directory
is needed:

- Config: ~/.config/brewctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "brewctl"

# Environment variable naming an explicit manifest file
MANIFEST_ENV_VAR = "BREWCTL_MANIFEST"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/brewctl/ (or XDG_CONFIG_HOME/brewctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_manifest_path() -> Path:
    """Get the user manifest file path.

    Returns:
        Path to ~/.config/brewctl/manifest.toml.
    """
    return get_config_dir() / "manifest.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/brewctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"
