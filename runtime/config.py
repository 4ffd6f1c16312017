"""Plugin configuration read from ``server.cfg`` and the environment.

Nothing is cached: every lookup re-reads the config file and environment so
changes take effect on the next request.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict


__all__ = ["config_path", "load_pluginconf", "pluginconf"]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "/etc/mcollective/server.cfg"
PLUGIN_PREFIX = "plugin."

# environment variable -> plugin option it overrides
ENV_OVERRIDES: Dict[str, str] = {
    "FILEMGR_TOUCH_FILE": "filemgr.touch_file",
}


def config_path() -> Path:
    raw = os.getenv("FILEMGR_CONFIG", DEFAULT_CONFIG_PATH).strip()
    return Path(raw or DEFAULT_CONFIG_PATH).expanduser()


def load_pluginconf(path: Path) -> Dict[str, str]:
    """Parse ``plugin.<key> = <value>`` lines out of an MCollective config file."""
    conf: Dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except FileNotFoundError:
        return conf
    except OSError as exc:
        logger.warning("Could not read config file '%s': %s", path, exc)
        return conf
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key.startswith(PLUGIN_PREFIX):
            continue
        conf[key[len(PLUGIN_PREFIX) :]] = value.strip()
    return conf


def pluginconf() -> Dict[str, str]:
    conf = load_pluginconf(config_path())
    for env_name, option in ENV_OVERRIDES.items():
        value = os.getenv(env_name, "").strip()
        if value:
            conf[option] = value
    return conf
