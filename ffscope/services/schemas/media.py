# ffscope/services/schemas/media.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ffscope.domain.entities.media import MediaInfo


class DurationRead(BaseModel):
    path: str
    method: str = Field(..., examples=["quick", "precise"])
    seconds: float = Field(..., ge=0)


class BitrateRead(BaseModel):
    path: str
    bitrate: str = Field(..., examples=["4010 kb/s"])


class TitleRead(BaseModel):
    path: str
    title: str


class SizeRead(BaseModel):
    path: str
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


class MediaInfoRead(BaseModel):
    path: str
    duration_sec: Optional[float] = None
    bitrate: Optional[str] = None
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_info(cls, path: str, info: MediaInfo) -> "MediaInfoRead":
        return cls(
            path=path,
            duration_sec=info.duration.total_seconds() if info.duration is not None else None,
            bitrate=info.bitrate,
            title=info.title,
            width=info.width,
            height=info.height,
        )


class TrimRequest(BaseModel):
    src: str = Field(..., description="Source file, relative to the media root", examples=["clips/in.mp4"])
    dst: str = Field(..., description="Destination file, relative to the media root", examples=["clips/out.mp4"])
    start: float = Field(0.0, ge=0, description="Offset into the source, in seconds")
    duration: float = Field(..., gt=0, description="Length of the clip, in seconds")


class ThumbnailRequest(BaseModel):
    src: str = Field(..., examples=["clips/in.mp4"])
    dst: str = Field(..., examples=["thumbs/in.jpg"])
    width: int = Field(..., ge=16, le=8192)
    height: int = Field(..., ge=16, le=8192)


class ArtifactResponse(BaseModel):
    ok: bool = True
    path: str
