# ffscope/services/ffmpeg/commands.py
from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import List

from ffscope.domain.ports.media_tool import Seconds


def format_seconds(value: Seconds) -> str:
    """ffmpeg time argument in plain seconds: 2 -> '2', 2.5 -> '2.5'."""
    if isinstance(value, timedelta):
        value = value.total_seconds()
    if value < 0:
        raise ValueError(f"negative time value: {value}")
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")


def probe_args(input_path: str | Path) -> List[str]:
    """Header-only look at the file; ffmpeg prints its summary and exits."""
    return ["-i", str(input_path)]


def decode_args(input_path: str | Path) -> List[str]:
    """Decode every frame into the null muxer so progress covers the whole stream."""
    return ["-i", str(input_path), "-f", "null", "-"]


def trim_args(input_path: str | Path, output_path: str | Path, start: Seconds, duration: Seconds) -> List[str]:
    # -ss before -i seeks the input, so -to counts from the new start
    return [
        "-y",
        "-ss", format_seconds(start),
        "-i", str(input_path),
        "-to", format_seconds(duration),
        "-c", "copy",
        str(output_path),
    ]


def thumbnail_args(input_path: str | Path, output_path: str | Path, width: int, height: int) -> List[str]:
    return [
        "-i", str(input_path),
        "-f", "mjpeg",
        "-vframes", "1",
        "-y",
        "-s", f"{int(width)}x{int(height)}",
        str(output_path),
    ]


def version_args() -> List[str]:
    return ["-version"]
