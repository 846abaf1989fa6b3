from __future__ import annotations
from datetime import timedelta
from pathlib import Path
from typing import Protocol

from ffscope.domain.entities.media import FrameSize, MediaInfo

Seconds = int | float | timedelta


class MediaToolPort(Protocol):
    def duration(self, path: Path | str) -> timedelta: ...           # full decode
    def quick_duration(self, path: Path | str) -> timedelta: ...     # header, then full decode
    def bitrate(self, path: Path | str) -> str: ...
    def title(self, path: Path | str) -> str: ...
    def size(self, path: Path | str) -> FrameSize: ...
    def info(self, path: Path | str) -> MediaInfo: ...

    def trim(self, src: Path | str, dst: Path | str, start: Seconds, duration: Seconds) -> None: ...

    def create_thumbnail(self, src: Path | str, dst: Path | str, width: int, height: int) -> None: ...

    def is_available(self) -> bool: ...
