"""
Configuration management for exif-view.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from exif_view.store.reader import BACKENDS

logger = logging.getLogger(__name__)

# Default locations to search for the config file
CONFIG_SEARCH_PATHS = [
    Path("exif_view.yaml"),
    Path("src/python/exif_view.yaml"),
    Path.home() / ".exif_view" / "config.yaml",
]


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default locations.

    Returns:
        Dictionary containing configuration. Empty if no config file exists
        in the default locations.

    Raises:
        FileNotFoundError: If config_path is given and does not exist.
    """
    path_to_load = None

    if config_path:
        if config_path.exists():
            path_to_load = config_path
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    if not path_to_load:
        logger.debug("No config file found, using defaults")
        return {}

    logger.info("Loading config from %s", path_to_load)

    with open(path_to_load, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    return config or {}


def get_reader_backend(config: Dict[str, Any]) -> str:
    """
    Get the EXIF reader backend from config.

    Args:
        config: Configuration dictionary

    Returns:
        One of "auto", "exifread" or "pillow" (default "auto")

    Raises:
        ValueError: If the configured backend is not recognized
    """
    backend = (config.get("reader") or {}).get("backend", "auto")
    if backend not in BACKENDS:
        raise ValueError(f"Config 'reader.backend' must be one of {BACKENDS}, got {backend!r}")
    return backend


def get_scan_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the directory scan settings from config.

    Args:
        config: Configuration dictionary

    Returns:
        Dictionary with 'recursive' and 'include_hidden' settings
    """
    scan_config = config.get("scan") or {}
    return {
        "recursive": bool(scan_config.get("recursive", False)),
        "include_hidden": bool(scan_config.get("include_hidden", False)),
    }


def get_log_level(config: Dict[str, Any]) -> str:
    """Get the logging level name from config (default INFO)."""
    return str((config.get("logging") or {}).get("level", "INFO")).upper()
