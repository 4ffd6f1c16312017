"""Drop-in action for removing a file."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from action_registry import ActionSpec
from filemgr import remove, resolve


class RemoveParams(BaseModel):
    file: Optional[str] = Field(
        default=None,
        description="File to remove; defaults to plugin.filemgr.touch_file",
    )


async def run(file: Optional[str] = None) -> Dict[str, Any]:
    """Remove the file; fails when it is not present."""
    remove(resolve(file))
    return {}


ACTION = ActionSpec(
    name="filemgr.remove",
    model=RemoveParams,
    handler=run,
    description="Remove a file.",
    instructions="Optional 'file'; falls back to the configured touch file",
)
