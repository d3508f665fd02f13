"""XDG Base Directory specification helpers."""

import os
from pathlib import Path


def get_xdg_data_dir() -> Path:
    """Get XDG data directory for adgen.

    Returns:
        Path to data directory: $XDG_DATA_HOME/adgen or ~/.local/share/adgen
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "adgen"
    return Path.home() / ".local" / "share" / "adgen"


def get_xdg_config_dir() -> Path:
    """Get XDG config directory for adgen.

    Returns:
        Path to config directory: $XDG_CONFIG_HOME/adgen or ~/.config/adgen
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "adgen"
    return Path.home() / ".config" / "adgen"
