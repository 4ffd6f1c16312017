# filemgr-agent/models/reply.py
# Purpose: Reply envelope returned for every action call.

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict

from pydantic import BaseModel, Field


class ReplyStatus(IntEnum):
    """MCollective-compatible status codes."""

    OK = 0
    ABORTED = 1
    UNKNOWN_ACTION = 2
    MISSING_DATA = 3
    INVALID_DATA = 4
    UNKNOWN_ERROR = 5


class Reply(BaseModel):
    action: str
    statuscode: ReplyStatus = ReplyStatus.OK
    statusmsg: str = "OK"
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.statuscode == ReplyStatus.OK

    @classmethod
    def failure(cls, action: str, status: ReplyStatus, message: str) -> "Reply":
        return cls(action=action, statuscode=status, statusmsg=message)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
