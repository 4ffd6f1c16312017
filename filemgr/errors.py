"""Failure types raised by the filemgr core.

Absence and unreadability of an inspected path are reported as data on
``FileStatus``; the exceptions here cover preconditions and mutations.
"""

from __future__ import annotations

from typing import Optional


class FileManagerError(Exception):
    """Base class carrying the target path and the underlying OS error."""

    def __init__(
        self, message: str, *, path: str = "", cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class NotFoundError(FileManagerError): ...


class NotDirectoryError(FileManagerError, NotADirectoryError): ...


class TouchError(FileManagerError): ...


class RemoveError(FileManagerError): ...


class ReadError(FileManagerError): ...


def describe_cause(exc: BaseException) -> str:
    return f"{exc.__class__.__name__}: {exc}"
