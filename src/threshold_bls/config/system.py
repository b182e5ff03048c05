"""Locating and loading the dealer configuration file."""

import os
from pathlib import Path
from typing import Optional

from .models import DealerConfig

DEALER_CONFIG_FILENAME = "dealer-config.json"
DEALER_CONFIG_ENV_VAR = "THRESHOLD_BLS_CONFIG"


def resolve_config_path(explicit: Optional[Path] = None, base_dir: Optional[Path] = None) -> Path:
    """
    Resolve the dealer config path.

    An explicit path wins; otherwise ``THRESHOLD_BLS_CONFIG`` is used, relative paths
    being taken from the current directory; otherwise ``config/dealer-config.json``
    under ``base_dir`` (default: the current directory).
    """
    if explicit is not None:
        return Path(explicit).resolve()
    env_value = os.getenv(DEALER_CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return (base / "config" / DEALER_CONFIG_FILENAME).resolve()


def load_dealer_config(explicit: Optional[Path] = None, base_dir: Optional[Path] = None) -> DealerConfig:
    """
    Load the dealer configuration.

    Raises:
        FileNotFoundError: if no config file exists at the resolved path.
        ValueError: if the JSON is invalid or fails validation.
    """
    path = resolve_config_path(explicit, base_dir)
    if not path.exists():
        raise FileNotFoundError(f"Dealer config not found at {path}")
    try:
        return DealerConfig.from_file(path)
    except ValueError as exc:
        raise ValueError(f"Invalid dealer config at {path}: {exc}") from exc
