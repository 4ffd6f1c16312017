"""Drop-in action for touching a file."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from action_registry import ActionSpec
from filemgr import resolve, touch


class TouchParams(BaseModel):
    file: Optional[str] = Field(
        default=None,
        description="File to touch; defaults to plugin.filemgr.touch_file",
    )


async def run(file: Optional[str] = None) -> Dict[str, Any]:
    """Create the file if absent, otherwise update its modification time."""
    touch(resolve(file))
    return {}


ACTION = ActionSpec(
    name="filemgr.touch",
    model=TouchParams,
    handler=run,
    description="Touch a file.",
    instructions="Optional 'file'; falls back to the configured touch file",
)
