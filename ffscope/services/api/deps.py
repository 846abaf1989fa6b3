# ffscope/services/api/deps.py
from __future__ import annotations
from pathlib import Path

from fastapi import HTTPException
from http import HTTPStatus

from ffscope.common.path.safe import safe_join
from ffscope.common.settings import get_settings
from ffscope.domain.ports.media_tool import MediaToolPort
from ffscope.services.ffmpeg.adapter import FFmpegAdapter


def get_media_tool() -> MediaToolPort:
    """
    Provide a MediaToolPort implementation (ffmpeg) via DI.
    Tests override this with a fake.
    """
    return FFmpegAdapter()


def media_path(rel: str) -> Path:
    """Resolve a request path under MEDIA_ROOT; 400 if it tries to leave it."""
    try:
        return safe_join(get_settings().media_root, rel)
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
