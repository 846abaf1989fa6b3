# tests/services/conftest.py
from __future__ import annotations
from datetime import timedelta

import pytest
from starlette.testclient import TestClient

from ffscope.domain.entities.media import FrameSize, MediaInfo
from ffscope.domain.errors import BitrateUnknown, ThumbnailFailed
from ffscope.services.api.app import create_app
from ffscope.services.api.deps import get_media_tool


class FakeMediaTool:
    """MediaToolPort double; records every call with its resolved paths."""

    def __init__(self):
        self.calls = []

    def duration(self, path):
        self.calls.append(("duration", path))
        return timedelta(seconds=10.04)

    def quick_duration(self, path):
        self.calls.append(("quick_duration", path))
        return timedelta(seconds=10)

    def bitrate(self, path):
        self.calls.append(("bitrate", path))
        raise BitrateUnknown()

    def title(self, path):
        self.calls.append(("title", path))
        return "test title"

    def size(self, path):
        self.calls.append(("size", path))
        return FrameSize(720, 1280)

    def info(self, path):
        self.calls.append(("info", path))
        return MediaInfo(duration=timedelta(seconds=10), title="test title", width=1280, height=720)

    def trim(self, src, dst, start, duration):
        self.calls.append(("trim", src, dst, start, duration))

    def create_thumbnail(self, src, dst, width, height):
        self.calls.append(("create_thumbnail", src, dst, width, height))
        raise ThumbnailFailed(returncode=1)

    def is_available(self):
        return True


@pytest.fixture()
def media_tool() -> FakeMediaTool:
    return FakeMediaTool()


@pytest.fixture()
def api_client(media_tool, tmp_path, monkeypatch):
    """
    A TestClient whose `get_media_tool` dependency yields the fake and whose
    MEDIA_ROOT points at a temp dir.
    """
    monkeypatch.setenv("MEDIA_ROOT", str(tmp_path))
    app = create_app()
    app.dependency_overrides[get_media_tool] = lambda: media_tool
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
