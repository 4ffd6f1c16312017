# filemgr-agent/filemgr/paths.py
# Purpose: Pick the effective target path for touch/remove/status.
from __future__ import annotations

from typing import Mapping, Optional

from runtime.config import pluginconf

DEFAULT_TOUCH_FILE = "/var/run/mcollective.plugin.filemgr.touch"
TOUCH_FILE_OPTION = "filemgr.touch_file"


def resolve(explicit: Optional[str], config: Optional[Mapping[str, str]] = None) -> str:
    """Return ``explicit`` if given, else the configured touch file, else the default.

    ``config`` is a snapshot of the plugin configuration; when omitted it is
    read fresh from :func:`runtime.config.pluginconf`.
    """
    if explicit:
        return explicit
    if config is None:
        config = pluginconf()
    return config.get(TOUCH_FILE_OPTION) or DEFAULT_TOUCH_FILE
