# filemgr-agent/filemgr/__init__.py
# Purpose: Core file inspection and manipulation used by the filemgr actions.
from __future__ import annotations

from .errors import (
    FileManagerError,
    NotDirectoryError,
    NotFoundError,
    ReadError,
    RemoveError,
    TouchError,
)
from .listing import DirectoryListing, list_directory
from .mutations import remove, touch
from .paths import DEFAULT_TOUCH_FILE, TOUCH_FILE_OPTION, resolve
from .status import classify, inspect, md5sum, render_mode

__all__ = [
    "DEFAULT_TOUCH_FILE",
    "TOUCH_FILE_OPTION",
    "DirectoryListing",
    "FileManagerError",
    "NotDirectoryError",
    "NotFoundError",
    "ReadError",
    "RemoveError",
    "TouchError",
    "classify",
    "inspect",
    "list_directory",
    "md5sum",
    "remove",
    "render_mode",
    "resolve",
    "touch",
]
