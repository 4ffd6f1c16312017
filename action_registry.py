# filemgr-agent/action_registry.py
# Purpose: Agent action registry with Pydantic request validation and reply shaping.
from __future__ import annotations

import asyncio
import importlib
import inspect
import logging
import pkgutil
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from filemgr.errors import FileManagerError
from models.reply import Reply, ReplyStatus

logger = logging.getLogger(__name__)


class ActionError(Exception): ...


class ActionAborted(Exception):
    """Raised by a handler to fail the current request with a message."""


@dataclass(slots=True)
class ActionSpec:
    """Lightweight descriptor for a single agent action."""

    name: str
    model: Type[BaseModel]
    handler: Callable[..., Any]
    description: str = ""
    instructions: str = ""


class ActionRegistry:
    def __init__(self):
        self._actions: Dict[str, Callable[..., Awaitable[Any]]] = {}
        self._meta: Dict[str, Dict[str, Any]] = {}
        self._models: Dict[str, Type[BaseModel]] = {}

    def _ensure_async(self, fn: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
        if asyncio.iscoroutinefunction(fn):
            return fn  # type: ignore[return-value]

        if not callable(fn):
            raise ActionError("Action handler must be callable")

        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = fn(*args, **kwargs)
            if inspect.isawaitable(result):
                return await result  # type: ignore[no-any-return]
            return result

        return wrapper

    def register(
        self,
        name: str,
        fn: Callable[..., Any],
        *,
        model: Type[BaseModel],
        description: str = "",
        instructions: str = "",
    ) -> None:
        if not name or not isinstance(name, str) or "." not in name:
            raise ActionError("Action name must look like '<agent>.<action>'")
        if name in self._actions:
            raise ActionError(f"Action already registered: {name}")
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise ActionError("Action must declare a Pydantic BaseModel via model=")
        self._actions[name] = self._ensure_async(fn)
        self._models[name] = model
        self._meta[name] = {
            "name": name,
            "description": description.strip(),
            "instructions": (instructions or (fn.__doc__ or "")).strip(),
            "schema": model.model_json_schema(),
        }

    def register_spec(self, spec: ActionSpec, *, module: Optional[str] = None) -> None:
        if spec.name in self._actions:
            return
        try:
            self.register(
                spec.name,
                spec.handler,
                model=spec.model,
                description=spec.description,
                instructions=spec.instructions,
            )
        except ActionError as exc:
            origin = f" from {module}" if module else ""
            raise ActionError(f"Failed to register {spec.name}{origin}: {exc}") from exc

    async def call(self, name: str, /, **request: Any) -> Reply:
        """Run ``name`` and convert every outcome into a :class:`Reply`.

        ``name`` is positional-only so a request may carry its own ``name`` key.
        """
        fn = self._actions.get(name)
        if fn is None:
            return Reply.failure(
                name, ReplyStatus.UNKNOWN_ACTION, f"Unknown action: {name}"
            )
        model = self._models[name]
        try:
            payload = model(**(request or {}))
        except ValidationError as e:
            return Reply.failure(
                name, ReplyStatus.INVALID_DATA, f"Validation failed for {name}: {e}"
            )

        try:
            result = await fn(**payload.model_dump())
        except (ActionAborted, FileManagerError) as exc:
            return Reply.failure(name, ReplyStatus.ABORTED, str(exc))
        except Exception as exc:
            logger.exception("Action %s failed unexpectedly", name)
            return Reply.failure(
                name,
                ReplyStatus.UNKNOWN_ERROR,
                f"{exc.__class__.__name__}: {exc}",
            )

        if isinstance(result, Reply):
            return result
        reply = Reply(action=name)
        if result:
            reply.data.update(result)
        return reply

    def list(self) -> List[str]:
        return sorted(self._actions.keys())

    def describe(self) -> List[Dict[str, Any]]:
        return [dict(self._meta[name]) for name in self.list()]


def autodiscover_actions(
    target: ActionRegistry, package: str = "actions"
) -> ActionRegistry:
    """Register the ``ACTION`` spec of every public module in ``package``."""
    pkg = importlib.import_module(package)
    for modinfo in pkgutil.iter_modules(pkg.__path__, pkg.__name__ + "."):
        if modinfo.name.rsplit(".", 1)[-1].startswith("_"):
            continue
        spec = getattr(importlib.import_module(modinfo.name), "ACTION", None)
        if isinstance(spec, ActionSpec):
            target.register_spec(spec, module=modinfo.name)
    return target
