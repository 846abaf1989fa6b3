# ffscope/domain/entities/media.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class ToolHandle:
    """Filesystem path (or PATH-resolvable name) of the external executable."""
    path: str

    def with_path(self, path: str) -> "ToolHandle":
        return ToolHandle(path=str(path))


class FrameSize(NamedTuple):
    width: int
    height: int

    def swapped(self) -> "FrameSize":
        return FrameSize(width=self.height, height=self.width)


@dataclass(frozen=True)
class MediaInfo:
    """
    Everything a single probe invocation could tell about a file.
    Fields the tool did not report stay None.
    """
    duration: Optional[timedelta] = None
    bitrate: Optional[str] = None
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def size(self) -> Optional[FrameSize]:
        if self.width is None or self.height is None:
            return None
        return FrameSize(self.width, self.height)
