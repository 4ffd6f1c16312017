"""Drop-in action for reporting file status."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from action_registry import ActionAborted, ActionSpec
from filemgr import inspect, resolve


class StatusParams(BaseModel):
    file: Optional[str] = Field(
        default=None,
        description="File to inspect; defaults to plugin.filemgr.touch_file",
    )


async def run(file: Optional[str] = None) -> Dict[str, Any]:
    """Return every status field of the file; fails when it does not exist."""
    stats = inspect(resolve(file))
    if not stats.present:
        raise ActionAborted(f"{stats.name} does not exist")
    return stats.as_reply()


ACTION = ActionSpec(
    name="filemgr.status",
    model=StatusParams,
    handler=run,
    description="Inspect a file.",
    instructions="Optional 'file'; returns type, mode, size, timestamps, owner and md5",
)
