"""Pytest configuration: asyncio test driver plus filemgr fixtures."""

from __future__ import annotations

import asyncio
import inspect
from pathlib import Path

import pytest

from action_registry import ActionRegistry, autodiscover_actions


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Register the ``asyncio`` marker used by the action and server tests."""

    config.addinivalue_line(
        "markers",
        "asyncio: mark a test as running inside an asyncio event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run ``async def`` tests to completion on a fresh event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name]
        for name in pyfuncitem._fixtureinfo.argnames
    }
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_function(**funcargs))
        loop.run_until_complete(loop.shutdown_asyncgens())
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True


@pytest.fixture(autouse=True)
def plugin_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point the plugin config at an empty per-test file."""

    cfg = tmp_path_factory.mktemp("etc") / "server.cfg"
    cfg.write_text("", encoding="utf-8")
    monkeypatch.setenv("FILEMGR_CONFIG", str(cfg))
    monkeypatch.delenv("FILEMGR_TOUCH_FILE", raising=False)
    return cfg


@pytest.fixture
def registry() -> ActionRegistry:
    return autodiscover_actions(ActionRegistry())
