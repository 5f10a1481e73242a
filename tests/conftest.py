"""Shared test fixtures for bsdlog test suite."""

import io
import json
import os
import queue
from unittest.mock import patch

import pytest

from bsdlog import manager as _manager_mod


# ---------------------------------------------------------------------------
# Default logger isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_default_logger():
    """Drop the module-level Logger so tests never share one."""
    _manager_mod.reset_logger()
    yield
    _manager_mod.reset_logger()


# ---------------------------------------------------------------------------
# Streams and consumers
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing writer output."""
    return io.StringIO()


class RecordingStream:
    """Text stream that records every write() call separately."""

    def __init__(self, events=None):
        self.writes = []
        self.events = events

    def write(self, text):
        self.writes.append(text)
        if self.events is not None:
            self.events.append(("writer", text))
        return len(text)


class RecordingConsumer:
    """Consumer that accepts every message and logs the put order."""

    def __init__(self, name, events):
        self.name = name
        self.events = events
        self.messages = []

    def put(self, item, timeout=None):
        self.messages.append(item)
        self.events.append((self.name, item.level))


@pytest.fixture
def events():
    """Shared list that recording consumers and streams append to."""
    return []


@pytest.fixture
def recording_stream(events):
    return RecordingStream(events)


@pytest.fixture
def make_consumer(events):
    """Factory for RecordingConsumer instances sharing ``events``."""
    def _make(name):
        return RecordingConsumer(name, events)
    return _make


@pytest.fixture
def full_queue():
    """A bounded queue that is already full and never drained."""
    q = queue.Queue(maxsize=1)
    q.put_nowait(object())
    return q


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.bsdlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, monkeypatch):
    """A project directory that is also the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .bsdlog.json file in the tmp project."""
    config = {
        "level": "WARNING",
        "include_level": True,
        "prefix": "proj: ",
        "flags": 0,
    }
    path = tmp_project / ".bsdlog.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".bsdlog"
    config_dir.mkdir()
    config = {
        "level": "INFO",
        "prefix": "global: ",
        "flags": ["date", "time"],
        "timeout": 0.25,
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
