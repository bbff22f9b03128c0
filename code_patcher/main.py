"""
Configuration and logging setup for the Code Patcher CLI and tools.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {"root_dir": ".", "encoding": "utf-8", "backup": True, "log_level": "INFO", }


# ---------------------------------------------------------------------------
# Configuration helpers
# ---------------------------------------------------------------------------


def load_config(
        config_path: str | Path = "code_patcher/config/patcher_config.json", ) -> dict[str, Any]:
    """Load JSON config, falling back to the packaged defaults.

    Parameters
    ----------
    config_path:
        Path to the JSON configuration file.  If the path points to a
        directory, the function will look for ``patcher_config.json`` inside.

    Returns
    -------
    Dict[str, Any]
        :data:`DEFAULT_CONFIG` updated with the parsed file.
    """
    cfg_file = Path(config_path)
    if cfg_file.is_dir():
        cfg_file = cfg_file / "patcher_config.json"

    if not cfg_file.exists():
        script_dir = Path(__file__).parent
        alt = script_dir / "config" / "patcher_config.json"
        if alt.exists():
            log.debug("Config %s not found, using %s", config_path, alt)
            cfg_file = alt
        else:
            raise FileNotFoundError(
                    f"Config file not found: {config_path} or {alt}"
                    )

    with cfg_file.open("r", encoding = "utf-8") as f:
        return {**DEFAULT_CONFIG, **json.load(f)}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(debug: bool, level: str = "INFO") -> None:
    """
    Setup logging for the Code Patcher.

    The logging level is `DEBUG` if `debug` is `True`, otherwise the
    configured `level` name (``INFO`` by default).
    """
    resolved = logging.DEBUG if debug else getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
            level = resolved, format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )
