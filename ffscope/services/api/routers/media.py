# ffscope/services/api/routers/media.py
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from ffscope.common.settings import get_settings
from ffscope.domain.enums.duration_method import DurationMethod
from ffscope.domain.ports.media_tool import MediaToolPort
from ffscope.services.api.deps import get_media_tool, media_path
from ffscope.services.schemas.media import (
    ArtifactResponse,
    BitrateRead,
    DurationRead,
    MediaInfoRead,
    SizeRead,
    ThumbnailRequest,
    TitleRead,
    TrimRequest,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/media", tags=["media"])

MediaPath = Annotated[str, Query(min_length=1, description="File path relative to the media root")]


@router.get("/info", response_model=MediaInfoRead)
def get_info(path: MediaPath, tool: MediaToolPort = Depends(get_media_tool)) -> MediaInfoRead:
    return MediaInfoRead.from_info(path, tool.info(media_path(path)))


@router.get("/duration", response_model=DurationRead)
def get_duration(
    path: MediaPath,
    method: DurationMethod = Query(DurationMethod.quick, description="quick reads the header, precise decodes"),
    tool: MediaToolPort = Depends(get_media_tool),
) -> DurationRead:
    src = media_path(path)
    if method is DurationMethod.precise:
        d = tool.duration(src)
    else:
        d = tool.quick_duration(src)
    return DurationRead(path=path, method=method.value, seconds=d.total_seconds())


@router.get("/bitrate", response_model=BitrateRead)
def get_bitrate(path: MediaPath, tool: MediaToolPort = Depends(get_media_tool)) -> BitrateRead:
    return BitrateRead(path=path, bitrate=tool.bitrate(media_path(path)))


@router.get("/title", response_model=TitleRead)
def get_title(path: MediaPath, tool: MediaToolPort = Depends(get_media_tool)) -> TitleRead:
    return TitleRead(path=path, title=tool.title(media_path(path)))


@router.get("/size", response_model=SizeRead)
def get_size(path: MediaPath, tool: MediaToolPort = Depends(get_media_tool)) -> SizeRead:
    width, height = tool.size(media_path(path))
    return SizeRead(path=path, width=width, height=height)


@router.post("/trim", response_model=ArtifactResponse)
def trim(req: TrimRequest, tool: MediaToolPort = Depends(get_media_tool)) -> ArtifactResponse:
    tool.trim(media_path(req.src), media_path(req.dst), req.start, req.duration)
    return ArtifactResponse(path=req.dst)


@router.post("/thumbnail", response_model=ArtifactResponse)
def thumbnail(req: ThumbnailRequest, tool: MediaToolPort = Depends(get_media_tool)) -> ArtifactResponse:
    tool.create_thumbnail(media_path(req.src), media_path(req.dst), req.width, req.height)
    return ArtifactResponse(path=req.dst)
