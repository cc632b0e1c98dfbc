"""Resolve the cdmiqos home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get cdmiqos home directory based on CDMIQOS_HOME or default to ~/.cdmiqos."""
    home_env = os.environ.get("CDMIQOS_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".cdmiqos"
