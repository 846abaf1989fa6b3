# ffscope/services/ffmpeg/adapter.py
from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import List, Optional

from ffscope.common.logging import get_logger
from ffscope.common.path.safe import is_regular_file
from ffscope.common.process.runner import Capture, run_tool, select_output
from ffscope.common.settings import get_settings
from ffscope.common.text.extract import NoMatch, first_match
from ffscope.domain.entities.media import FrameSize, MediaInfo, ToolHandle
from ffscope.domain.errors import ThumbnailFailed, TrimFailed
from ffscope.domain.ports.media_tool import MediaToolPort, Seconds
from ffscope.services.ffmpeg import commands, parsers, patterns
from ffscope.services.ffmpeg.duration import PRECISE_ONLY, QUICK_THEN_PRECISE, resolve_duration

logger = get_logger(__name__)


class FFmpegAdapter(MediaToolPort):
    """
    Infrastructure adapter implementing MediaToolPort on top of the `ffmpeg` CLI.

    Each call spawns one ffmpeg process (two for a quick duration that has to
    fall back), blocks until it exits and reads its diagnostic text. The only
    state is the ToolHandle, so one instance can serve several threads.
    """

    def __init__(self, ffmpeg_bin: Optional[str] = None, timeout_sec: Optional[float] = None):
        cfg = get_settings()
        self._handle = ToolHandle(path=str(ffmpeg_bin or cfg.ffmpeg.bin))
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.ffmpeg.timeout_sec
        self.log_output = cfg.ffmpeg.log_output

    @property
    def path(self) -> str:
        return self._handle.path

    @property
    def handle(self) -> ToolHandle:
        return self._handle

    def set_path(self, path: str | Path) -> "FFmpegAdapter":
        """Point the adapter at another ffmpeg executable. Chainable."""
        self._handle = self._handle.with_path(str(path))
        return self

    # ---- Port API: metadata ---------------------------------------------------
    def duration(self, path: Path | str) -> timedelta:
        """Duration measured by decoding the whole file. Slow but exact."""
        return resolve_duration(self._invoke, path, PRECISE_ONLY)

    def quick_duration(self, path: Path | str) -> timedelta:
        """Container duration; decodes the file only if the header has none."""
        return resolve_duration(self._invoke, path, QUICK_THEN_PRECISE)

    def bitrate(self, path: Path | str) -> str:
        return parsers.parse_bitrate(self._probe(path))

    def title(self, path: Path | str) -> str:
        return parsers.parse_title(self._probe(path))

    def size(self, path: Path | str) -> FrameSize:
        """Displayed (width, height); storage size swapped for 90/270 degree rotations."""
        return parsers.parse_display_size(self._probe(path))

    def info(self, path: Path | str) -> MediaInfo:
        return parsers.parse_info(self._probe(path))

    # ---- Port API: artifacts --------------------------------------------------
    def trim(self, src: Path | str, dst: Path | str, start: Seconds, duration: Seconds) -> None:
        """
        Stream-copy `duration` worth of `src` starting at `start` into `dst`,
        overwriting it. Only ffmpeg's exit status is checked.
        """
        capture = self._invoke(commands.trim_args(src, dst, start, duration))
        if not capture.ok:
            logger.warning("trim %s -> %s failed (rc=%s, %s)", src, dst, capture.returncode, capture.error)
            raise TrimFailed(output=capture.stderr_text, returncode=capture.returncode)

    def create_thumbnail(self, src: Path | str, dst: Path | str, width: int, height: int) -> None:
        """Write the first frame of `src` as a `width`x`height` JPEG to `dst`."""
        capture = self._invoke(commands.thumbnail_args(src, dst, width, height))
        if not capture.ok:
            logger.warning("thumbnail %s -> %s failed (rc=%s, %s)", src, dst, capture.returncode, capture.error)
            raise ThumbnailFailed(output=capture.stderr_text, returncode=capture.returncode)
        # ffmpeg can exit 0 without writing anything for some broken inputs
        if not is_regular_file(dst):
            logger.warning("thumbnail %s: ffmpeg succeeded but %s does not exist", src, dst)
            raise ThumbnailFailed(output=capture.stderr_text, returncode=capture.returncode)

    # ---- Tooling --------------------------------------------------------------
    def is_available(self) -> bool:
        """Whether the configured path runs and identifies itself as ffmpeg."""
        capture = self._invoke(commands.version_args())
        try:
            first_match(patterns.VERSION_BANNER, select_output(capture))
        except NoMatch:
            return False
        return True

    # ---- internals ------------------------------------------------------------
    def _invoke(self, args: List[str]) -> Capture:
        capture = run_tool(self._handle.path, args, timeout=self.timeout_sec)
        if self.log_output:
            logger.debug("ffmpeg rc=%s stderr:\n%s", capture.returncode, capture.stderr_text)
        return capture

    def _probe(self, path: Path | str) -> str:
        return select_output(self._invoke(commands.probe_args(path)))
