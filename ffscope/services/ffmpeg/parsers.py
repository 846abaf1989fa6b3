# ffscope/services/ffmpeg/parsers.py
from __future__ import annotations

from datetime import timedelta
from typing import Optional, Sequence

from ffscope.common.text.extract import ExtractionPattern, NoMatch, first_match, last_match
from ffscope.domain.entities.media import FrameSize, MediaInfo
from ffscope.domain.errors import BitrateUnknown, DurationUnknown, SizeUnknown, TitleUnknown
from ffscope.domain.policies.rotation import apply_rotation
from ffscope.services.ffmpeg import patterns


def parse_timestamp(parts: Sequence[str]) -> timedelta:
    """('01', '02', '03.50') -> 1h 2m 3.5s; fractional seconds are kept."""
    h, m, s = parts
    return timedelta(hours=int(h), minutes=int(m), seconds=float(s))


def _duration(pattern: ExtractionPattern, text: str, *, last: bool) -> timedelta:
    try:
        parts = last_match(pattern, text) if last else first_match(pattern, text)
        return parse_timestamp(parts)
    except (NoMatch, ValueError) as e:
        raise DurationUnknown() from e


def parse_progress_duration(text: str) -> timedelta:
    """Last `time=` progress stamp of a full decode."""
    return _duration(patterns.TIME_PROGRESS, text, last=True)


def parse_container_duration(text: str) -> timedelta:
    """`Duration:` field of the input summary."""
    return _duration(patterns.CONTAINER_DURATION, text, last=False)


def parse_bitrate(text: str) -> str:
    """Bitrate exactly as ffmpeg prints it, unit included (e.g. '4010 kb/s')."""
    try:
        (value,) = first_match(patterns.BITRATE, text)
    except NoMatch as e:
        raise BitrateUnknown() from e
    return value


def parse_title(text: str) -> str:
    try:
        (value,) = first_match(patterns.TITLE, text)
    except NoMatch as e:
        raise TitleUnknown() from e
    return value


def parse_frame_size(text: str) -> FrameSize:
    """Stored frame size of the first video stream, before any rotation."""
    try:
        w, h = first_match(patterns.VIDEO_SIZE, text)
        return FrameSize(width=int(w), height=int(h))
    except (NoMatch, ValueError) as e:
        raise SizeUnknown() from e


def parse_rotation(text: str) -> Optional[float]:
    """Display rotation in degrees, or None when absent or unreadable."""
    try:
        (value,) = first_match(patterns.ROTATION, text)
        return float(value)
    except (NoMatch, ValueError):
        return None


def parse_display_size(text: str) -> FrameSize:
    return apply_rotation(parse_frame_size(text), parse_rotation(text))


def parse_info(text: str) -> MediaInfo:
    """Best-effort MediaInfo from one probe report; unknown fields stay None."""
    def _maybe(fn):
        try:
            return fn(text)
        except (DurationUnknown, BitrateUnknown, TitleUnknown, SizeUnknown):
            return None

    size = _maybe(parse_display_size)
    return MediaInfo(
        duration=_maybe(parse_container_duration),
        bitrate=_maybe(parse_bitrate),
        title=_maybe(parse_title),
        width=size.width if size else None,
        height=size.height if size else None,
    )
