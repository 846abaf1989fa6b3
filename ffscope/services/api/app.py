from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ffscope.common.logging import get_logger
from ffscope.common.settings import get_settings
from ffscope.domain.errors import MediaToolError, ThumbnailFailed, TrimFailed
from ffscope.services.api.routers import health, media

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__, cfg.log_level)


async def media_tool_error_handler(request: Request, exc: MediaToolError) -> JSONResponse:
    # ffmpeg ran and failed -> upstream problem; ffmpeg ran and said nothing useful -> bad input
    if isinstance(exc, (TrimFailed, ThumbnailFailed)):
        status = HTTPStatus.BAD_GATEWAY
    else:
        status = HTTPStatus.UNPROCESSABLE_ENTITY
    logger.info("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "kind": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="ffscope API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(MediaToolError, media_tool_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(media.router)
    return app

app = create_app()
