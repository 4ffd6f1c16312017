# filemgr-agent/filemgr/mutations.py
# Purpose: touch/remove with OS failures wrapped in filemgr errors.
from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import NotFoundError, RemoveError, TouchError, describe_cause

logger = logging.getLogger(__name__)


def touch(path: str) -> None:
    """Create ``path`` if missing, otherwise bump its timestamps."""
    try:
        Path(path).touch(exist_ok=True)
    except OSError as exc:
        message = f"Could not touch file '{path}': {describe_cause(exc)}"
        logger.warning(message)
        raise TouchError(message, path=path, cause=exc) from exc
    logger.debug("Touched file '%s'", path)


def remove(path: str) -> None:
    # existence check and unlink are separate steps; a concurrent change in
    # between surfaces as RemoveError
    if not os.path.exists(path):
        logger.debug("Asked to remove file '%s', but it does not exist", path)
        raise NotFoundError(
            f"Could not remove file '{path}' - it is not present", path=path
        )
    try:
        os.remove(path)
    except OSError as exc:
        message = f"Could not remove file '{path}': {describe_cause(exc)}"
        logger.warning(message)
        raise RemoveError(message, path=path, cause=exc) from exc
    logger.debug("Removed file '%s'", path)
