"""File status inspection shared by the ``status`` and ``list`` actions."""

from __future__ import annotations

import hashlib
import logging
import os
import stat
from typing import Callable, List, Tuple

from models.file_status import (
    PERMISSION_DENIED,
    PRESENT,
    FileStatus,
    FileType,
)

from .errors import ReadError, describe_cause

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024

# checked in order, first match wins
_TYPE_CHECKS: List[Tuple[Callable[[int], bool], FileType]] = [
    (stat.S_ISDIR, FileType.DIRECTORY),
    (stat.S_ISREG, FileType.FILE),
    (stat.S_ISLNK, FileType.SYMLINK),
    (stat.S_ISSOCK, FileType.SOCKET),
    (stat.S_ISCHR, FileType.CHARDEV),
    (stat.S_ISBLK, FileType.BLOCKDEV),
]


def classify(mode: int) -> FileType:
    for check, kind in _TYPE_CHECKS:
        if check(mode):
            return kind
    return FileType.UNKNOWN


def render_mode(mode: int) -> str:
    """Render raw ``st_mode`` as octal text, e.g. ``511 -> "777"``."""
    return format(mode, "o")


def md5sum(path: str) -> str:
    digest = hashlib.md5()
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        raise ReadError(
            f"Could not read file '{path}': {describe_cause(exc)}", path=path, cause=exc
        ) from exc
    return digest.hexdigest()


def inspect(path: str) -> FileStatus:
    """Return a fully populated :class:`FileStatus` for ``path``.

    A missing path yields ``present=False`` and an unreadable one yields the
    permission message with every other field left at its default; neither
    raises. Only a failure while hashing a regular file raises
    :class:`ReadError`.
    """
    if not os.path.exists(path):
        logger.debug("Asked for status of '%s' - it is not present", path)
        return FileStatus(name=path)

    logger.debug("Asked for status of '%s' - it is present", path)
    if not os.access(path, os.R_OK):
        return FileStatus(name=path, present=True, output=PERMISSION_DENIED)

    try:
        st = os.lstat(path) if os.path.islink(path) else os.stat(path)
    except FileNotFoundError:
        return FileStatus(name=path)
    except PermissionError:
        return FileStatus(name=path, present=True, output=PERMISSION_DENIED)
    except OSError as exc:
        raise ReadError(
            f"Could not stat '{path}': {describe_cause(exc)}", path=path, cause=exc
        ) from exc

    kind = classify(st.st_mode)
    return FileStatus(
        name=path,
        present=True,
        output=PRESENT,
        type=kind,
        mode=render_mode(st.st_mode),
        size=st.st_size,
        mtime=st.st_mtime,
        ctime=st.st_ctime,
        atime=st.st_atime,
        mtime_seconds=int(st.st_mtime),
        ctime_seconds=int(st.st_ctime),
        atime_seconds=int(st.st_atime),
        md5=md5sum(path) if kind is FileType.FILE else 0,
        uid=st.st_uid,
        gid=st.st_gid,
    )
