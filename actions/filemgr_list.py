"""Drop-in action for listing a directory."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from action_registry import ActionSpec
from filemgr import list_directory


class ListParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    directory: str = Field(
        ..., alias="dir", min_length=1, description="Directory to list"
    )
    details: bool = Field(
        False, description="Attach full file status to every entry"
    )


async def run(directory: str, details: bool = False) -> Dict[str, Any]:
    """Return the directory's immediate children."""
    listing = list_directory(directory, detail=details)
    if not details:
        return {"files": listing}
    files: List[Dict[str, Any]] = []
    for entry in listing:
        files.append({path: status.as_reply() for path, status in entry.items()})
    return {"files": files}


ACTION = ActionSpec(
    name="filemgr.list",
    model=ListParams,
    handler=run,
    description="List a directory.",
    instructions="Provide 'dir'; details=true returns {path: status} entries",
)
