# filemgr-agent/models/file_status.py
# Purpose: Uniform-shape metadata record produced by filemgr.status.inspect.

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict

NOT_PRESENT = "not present"
PRESENT = "present"
PERMISSION_DENIED = "you do not have permission to read this file"


class FileType(str, Enum):
    UNKNOWN = "unknown"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SOCKET = "socket"
    CHARDEV = "chardev"
    BLOCKDEV = "blockdev"


class FileStatus(BaseModel):
    """Every field is always populated; defaults mean "not measured"."""

    model_config = ConfigDict(frozen=True)

    name: str
    present: bool = False
    output: str = NOT_PRESENT
    type: FileType = FileType.UNKNOWN
    mode: str = "0000"
    size: int = 0
    mtime: Union[int, float] = 0
    ctime: Union[int, float] = 0
    atime: Union[int, float] = 0
    mtime_seconds: int = 0
    ctime_seconds: int = 0
    atime_seconds: int = 0
    # hex digest, or the sentinel 0 when not computed
    md5: Union[str, int] = 0
    uid: int = 0
    gid: int = 0

    def as_reply(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
