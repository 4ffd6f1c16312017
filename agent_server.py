from __future__ import annotations

import json
import logging
from typing import Optional

from aiohttp import web

from action_registry import ActionRegistry

logger = logging.getLogger(__name__)


class AgentServer:
    """HTTP request/reply transport in front of an :class:`ActionRegistry`."""

    def __init__(
        self,
        registry: ActionRegistry,
        *,
        host: str = "127.0.0.1",
        port: int = 8000,
    ) -> None:
        self.registry = registry
        self.host = host
        self.port = port
        self._app = web.Application()
        self._runner: web.AppRunner | None = None
        self._site: web.BaseSite | None = None
        self._build_routes()

    @property
    def app(self) -> web.Application:
        return self._app

    # ------------------------------------------------------------------
    # Lifecycle
    async def start(self) -> None:
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        self._site = web.TCPSite(self._runner, self.host, self.port)
        await self._site.start()
        logger.info("Agent server listening on %s:%s", self.host, self.port)

    async def stop(self) -> None:
        if self._site:
            await self._site.stop()
            self._site = None
        if self._runner:
            await self._runner.cleanup()
            self._runner = None

    # ------------------------------------------------------------------
    def _build_routes(self) -> None:
        self._app.router.add_get("/api/health", self._health)
        self._app.router.add_get("/api/actions", self._actions_api)
        self._app.router.add_post("/api/agent/{agent}/{action}", self._call_action)

    # ------------------------------------------------------------------
    async def _health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def _actions_api(self, request: web.Request) -> web.Response:
        return web.json_response({"actions": self.registry.describe()})

    async def _call_action(self, request: web.Request) -> web.Response:
        name = f"{request.match_info['agent']}.{request.match_info['action']}"
        data: Optional[dict] = {}
        if request.can_read_body:
            try:
                data = await request.json()
            except json.JSONDecodeError:
                raise web.HTTPBadRequest(text="invalid json")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise web.HTTPBadRequest(text="request body must be a JSON object")
        reply = await self.registry.call(name, **data)
        logger.debug("%s -> %s %s", name, int(reply.statuscode), reply.statusmsg)
        return web.json_response(reply.as_dict())
