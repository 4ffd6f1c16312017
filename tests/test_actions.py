from __future__ import annotations

import hashlib
import os

import pytest

import actions.filemgr_touch as touch_action
import filemgr.listing as listing_mod
from filemgr import DEFAULT_TOUCH_FILE
from models.file_status import FileStatus
from models.reply import ReplyStatus


# touch ---------------------------------------------------------------------


@pytest.mark.asyncio
async def test_touch_supplied_file(registry, tmp_path):
    target = tmp_path / "foo"
    reply = await registry.call("filemgr.touch", file=str(target))
    assert reply.ok
    assert reply.data == {}
    assert target.exists()


@pytest.mark.asyncio
async def test_touch_file_from_config(registry, tmp_path, plugin_config):
    target = tmp_path / "foo2"
    plugin_config.write_text(f"plugin.filemgr.touch_file = {target}\n")
    reply = await registry.call("filemgr.touch", file=None)
    assert reply.ok
    assert target.exists()


@pytest.mark.asyncio
async def test_touch_default_file_without_argument_or_config(registry, monkeypatch):
    touched = []
    monkeypatch.setattr(touch_action, "touch", touched.append)
    reply = await registry.call("filemgr.touch", file=None)
    assert reply.ok
    assert touched == [DEFAULT_TOUCH_FILE]


@pytest.mark.asyncio
async def test_touch_failure_aborts(registry, tmp_path):
    target = tmp_path / "no" / "such" / "dir"
    reply = await registry.call("filemgr.touch", file=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg.startswith(f"Could not touch file '{target}':")


# remove --------------------------------------------------------------------


@pytest.mark.asyncio
async def test_remove_missing_file_aborts(registry, tmp_path):
    target = tmp_path / "foo"
    reply = await registry.call("filemgr.remove", file=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg == f"Could not remove file '{target}' - it is not present"


@pytest.mark.asyncio
async def test_remove_failure_aborts(registry, tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    reply = await registry.call("filemgr.remove", file=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg.startswith(f"Could not remove file '{target}':")


@pytest.mark.asyncio
async def test_remove_file(registry, tmp_path):
    target = tmp_path / "foo"
    target.write_text("x", encoding="utf-8")
    reply = await registry.call("filemgr.remove", file=str(target))
    assert reply.ok
    assert reply.statusmsg == "OK"
    assert not target.exists()


# list ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_missing_directory_aborts(registry, tmp_path):
    reply = await registry.call("filemgr.list", dir=str(tmp_path / "rspec"))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg == "Could not read directory. Directory does not exist."


@pytest.mark.asyncio
async def test_list_non_directory_aborts(registry, tmp_path):
    target = tmp_path / "rspec"
    target.write_text("", encoding="utf-8")
    reply = await registry.call("filemgr.list", dir=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg == f"Could not read directory. '{target}' is not a directory"


@pytest.mark.asyncio
async def test_list_returns_paths(registry, tmp_path):
    (tmp_path / "file.1").touch()
    (tmp_path / "file.2").touch()
    reply = await registry.call("filemgr.list", dir=str(tmp_path))
    assert reply.ok
    assert sorted(reply.data["files"]) == [
        str(tmp_path / "file.1"),
        str(tmp_path / "file.2"),
    ]


@pytest.mark.asyncio
async def test_list_details_uses_file_status(registry, tmp_path, monkeypatch):
    (tmp_path / "file.1").touch()
    (tmp_path / "file.2").touch()
    canned = {
        str(tmp_path / "file.1"): FileStatus(name="file.1", output="present", mode="600"),
        str(tmp_path / "file.2"): FileStatus(name="file.2", output="present", mode="700"),
    }
    monkeypatch.setattr(listing_mod, "inspect", canned.__getitem__)

    reply = await registry.call("filemgr.list", dir=str(tmp_path), details=True)
    assert reply.ok
    files = sorted(reply.data["files"], key=lambda entry: next(iter(entry)))
    assert files == [
        {path: canned[path].as_reply()} for path in sorted(canned)
    ]
    assert files[0][str(tmp_path / "file.1")]["mode"] == "600"


@pytest.mark.asyncio
async def test_list_details_with_real_files(registry, tmp_path):
    (tmp_path / "data").write_bytes(b"abc")
    reply = await registry.call("filemgr.list", dir=str(tmp_path), details=True)
    assert reply.ok
    [entry] = reply.data["files"]
    status = entry[str(tmp_path / "data")]
    assert status["type"] == "file"
    assert status["md5"] == hashlib.md5(b"abc").hexdigest()
    assert status["present"] is True


@pytest.mark.asyncio
async def test_list_requires_dir(registry):
    reply = await registry.call("filemgr.list")
    assert reply.statuscode == ReplyStatus.INVALID_DATA


# status --------------------------------------------------------------------


@pytest.mark.asyncio
async def test_status_missing_file_aborts(registry, tmp_path):
    target = tmp_path / "foo"
    reply = await registry.call("filemgr.status", file=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg == f"{target} does not exist"


@pytest.mark.asyncio
async def test_status_unreadable_file_returns_defaults(registry, tmp_path, monkeypatch):
    target = tmp_path / "foo"
    target.write_text("x", encoding="utf-8")
    monkeypatch.setattr(os, "access", lambda path, mode: False)

    reply = await registry.call("filemgr.status", file=str(target))
    assert reply.ok
    assert reply.data == {
        "output": "you do not have permission to read this file",
        "name": str(target),
        "type": "unknown",
        "mode": "0000",
        "present": True,
        "size": 0,
        "mtime": 0,
        "ctime": 0,
        "atime": 0,
        "mtime_seconds": 0,
        "ctime_seconds": 0,
        "atime_seconds": 0,
        "md5": 0,
        "uid": 0,
        "gid": 0,
    }


@pytest.mark.asyncio
async def test_status_returns_file_status(registry, tmp_path):
    target = tmp_path / "foo"
    target.write_bytes(b"")
    st = target.stat()

    reply = await registry.call("filemgr.status", file=str(target))
    assert reply.ok
    assert reply.data["output"] == "present"
    assert reply.data["present"] is True
    assert reply.data["size"] == 0
    assert reply.data["type"] == "file"
    assert reply.data["md5"] == hashlib.md5(b"").hexdigest()
    assert reply.data["mode"] == format(st.st_mode, "o")
    assert reply.data["uid"] == st.st_uid
    assert reply.data["mtime_seconds"] == int(st.st_mtime)


@pytest.mark.asyncio
async def test_status_defaults_to_configured_file(registry, tmp_path, monkeypatch):
    target = tmp_path / "configured"
    target.write_text("x", encoding="utf-8")
    monkeypatch.setenv("FILEMGR_TOUCH_FILE", str(target))
    reply = await registry.call("filemgr.status")
    assert reply.ok
    assert reply.data["name"] == str(target)


@pytest.mark.asyncio
async def test_status_read_failure_aborts(registry, tmp_path, monkeypatch):
    import filemgr.status as status_mod

    target = tmp_path / "foo"
    target.write_text("x", encoding="utf-8")

    def broken_open(*args, **kwargs):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(status_mod, "open", broken_open, raising=False)
    reply = await registry.call("filemgr.status", file=str(target))
    assert reply.statuscode == ReplyStatus.ABORTED
    assert reply.statusmsg.startswith(f"Could not read file '{target}': OSError:")
