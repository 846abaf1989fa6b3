# ffscope/services/ffmpeg/patterns.py
"""
Lines of ffmpeg's diagnostic output that carry metadata.

    frame=  250 fps=0.0 q=-0.0 Lsize=N/A time=00:00:10.00 bitrate=N/A speed= 449x
    Duration: 00:00:10.00, start: 0.000000, bitrate: 4010 kb/s
    title           : test title
    Stream #0:0: Video: mpeg4 (Simple Profile) (FMP4 / 0x34504D46), yuv420p, 1280x720 [SAR 1:1 DAR 16:9], ...
    displaymatrix: rotation of -90.00 degrees
"""
from __future__ import annotations

from ffscope.common.text.extract import ExtractionPattern

TIME_PROGRESS = ExtractionPattern.compile(
    "time_progress", r"time=([0-9]{2}):([0-9]{2}):([0-9]{2}\.[0-9]+)", arity=3
)
CONTAINER_DURATION = ExtractionPattern.compile(
    "container_duration", r"Duration: ([0-9]{2}):([0-9]{2}):([0-9]{2}\.[0-9]+)", arity=3
)
BITRATE = ExtractionPattern.compile("bitrate", r"bitrate: (.*)", arity=1)
TITLE = ExtractionPattern.compile("title", r"title\s*: (.*)", arity=1)
VIDEO_SIZE = ExtractionPattern.compile(
    "video_size", r"Stream.*Video.* ([0-9]+)x([0-9]+)[ ,]", arity=2
)
ROTATION = ExtractionPattern.compile(
    "rotation", r"displaymatrix: rotation of (-?\d*\.?\d*) degrees", arity=1
)
VERSION_BANNER = ExtractionPattern.compile("version_banner", r"(ffmpeg version)", arity=1)
