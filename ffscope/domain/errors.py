# ffscope/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class MediaToolError(RuntimeError):
    """
    Base for every failure the media tool adapter reports.

    Covers both "the tool could not run" and "the tool ran but its output did
    not have the expected shape"; callers get no metadata either way.
    """
    message: str = "Media tool failed"
    output: Optional[str] = None
    returncode: Optional[int] = None

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class DurationUnknown(MediaToolError):
    message: str = "Could not determine the duration"


@dataclass(eq=False)
class BitrateUnknown(MediaToolError):
    message: str = "Could not determine the bitrate"


@dataclass(eq=False)
class TitleUnknown(MediaToolError):
    message: str = "Could not determine the title"


@dataclass(eq=False)
class SizeUnknown(MediaToolError):
    message: str = "Could not determine the size"


@dataclass(eq=False)
class ThumbnailFailed(MediaToolError):
    message: str = "Could not create thumbnail"


@dataclass(eq=False)
class TrimFailed(MediaToolError):
    message: str = "Could not trim video"
