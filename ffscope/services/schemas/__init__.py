from ffscope.services.schemas.media import (
    DurationRead,
    BitrateRead,
    TitleRead,
    SizeRead,
    MediaInfoRead,
    TrimRequest,
    ThumbnailRequest,
    ArtifactResponse,
)
__all__ = [
    "DurationRead",
    "BitrateRead",
    "TitleRead",
    "SizeRead",
    "MediaInfoRead",
    "TrimRequest",
    "ThumbnailRequest",
    "ArtifactResponse",
]
