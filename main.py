from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Dict, List, Optional, Sequence

try:
    from dotenv import load_dotenv  # type: ignore

    load_dotenv()
except Exception:
    pass

from action_registry import ActionRegistry, autodiscover_actions
from agent_server import AgentServer


def parse_args_list(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``["file=/tmp/x", "details=true"]`` into request keyword arguments.

    Values stay strings; the action's request model coerces them.
    """
    request: Dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        request[key.strip()] = value
    return request


async def call(registry: ActionRegistry, name: str, request: Dict[str, str]) -> int:
    reply = await registry.call(name, **request)
    print(json.dumps(reply.as_dict(), indent=2, sort_keys=True))
    return 0 if reply.ok else 1


async def serve(registry: ActionRegistry, *, host: str, port: int) -> None:
    server = AgentServer(registry, host=host, port=port)
    await server.start()
    try:
        await asyncio.Event().wait()
    except asyncio.CancelledError:
        pass
    finally:
        await server.stop()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="filemgr agent")
    p.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("call", help="Invoke a single action and print the reply.")
    c.add_argument("action", help="Action name, e.g. status or touch.")
    c.add_argument("--agent", default="filemgr", help="Agent the action belongs to.")
    c.add_argument(
        "--arg",
        dest="args",
        action="append",
        metavar="KEY=VALUE",
        help="Request argument; may be repeated.",
    )

    s = sub.add_parser("serve", help="Serve actions over HTTP.")
    s.add_argument(
        "--host",
        default=os.getenv("FILEMGR_HOST", "127.0.0.1"),
        help="Host interface to bind.",
    )
    s.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("FILEMGR_PORT", "8000")),
        help="Port to bind.",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    registry = autodiscover_actions(ActionRegistry())

    if args.command == "call":
        try:
            request = parse_args_list(args.args)
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        return asyncio.run(call(registry, f"{args.agent}.{args.action}", request))

    try:
        asyncio.run(serve(registry, host=args.host, port=args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
