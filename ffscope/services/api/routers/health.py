# ffscope/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from ffscope.common.settings import get_settings
from ffscope.domain.ports.media_tool import MediaToolPort
from ffscope.services.api.deps import get_media_tool

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["health"])

@router.get("/healthz")
def healthz(tool: MediaToolPort = Depends(get_media_tool)):
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "ffmpeg": tool.is_available(),
    }
