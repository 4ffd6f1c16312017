# filemgr-agent/filemgr/listing.py
# Purpose: Enumerate a directory's immediate children, optionally with status.
from __future__ import annotations

import os
from typing import Dict, List, Union

from models.file_status import FileStatus

from .errors import NotDirectoryError, NotFoundError, ReadError, describe_cause
from .status import inspect

DirectoryListing = Union[List[str], List[Dict[str, FileStatus]]]


def _children(directory: str) -> List[str]:
    try:
        # every child but . and .., dot-files included (a "*" glob would skip them)
        with os.scandir(directory) as entries:
            return [os.path.join(directory, entry.name) for entry in entries]
    except OSError as exc:
        raise ReadError(
            f"Could not read directory '{directory}': {describe_cause(exc)}",
            path=directory,
            cause=exc,
        ) from exc


def list_directory(directory: str, detail: bool = False) -> DirectoryListing:
    """List ``directory`` one level deep in enumeration order.

    With ``detail`` each entry becomes ``{path: FileStatus}``; absent or
    unreadable children still appear, carrying their status as data.
    """
    if not os.path.exists(directory):
        raise NotFoundError(
            "Could not read directory. Directory does not exist.", path=directory
        )
    if not os.path.isdir(directory):
        raise NotDirectoryError(
            f"Could not read directory. '{directory}' is not a directory",
            path=directory,
        )

    paths = _children(directory)
    if not detail:
        return paths
    return [{path: inspect(path)} for path in paths]
