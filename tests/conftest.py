# tests/conftest.py
from __future__ import annotations
import pytest

from ffscope.common import settings as settings_mod

PROBE_OUTPUT = """\
ffmpeg version 6.1.1-3ubuntu5 Copyright (c) 2000-2023 the FFmpeg developers
  built with gcc 13 (Ubuntu 13.2.0-23ubuntu3)
Input #0, avi, from 'testVideo.avi':
  Metadata:
    title           : test title
    software        : Lavf60.16.100
  Duration: 00:00:10.00, start: 0.000000, bitrate: 4010 kb/s
  Stream #0:0: Video: mpeg4 (Simple Profile) (FMP4 / 0x34504D46), yuv420p, 1280x720 [SAR 1:1 DAR 16:9], 4004 kb/s, 25 fps, 25 tbr, 25 tbn
At least one output file must be specified
"""

ROTATED_PROBE_OUTPUT = """\
Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'rotated.mp4':
  Metadata:
    major_brand     : isom
    encoder         : Lavf60.16.100
  Duration: 00:00:10.00, start: 0.000000, bitrate: 213 kb/s
  Stream #0:0[0x1](und): Video: h264 (High) (avc1 / 0x31637661), yuv420p(progressive), 1280x720 [SAR 1:1 DAR 16:9], 210 kb/s, 25 fps, 25 tbr, 12800 tbn (default)
    Metadata:
      handler_name    : VideoHandler
    Side data:
      displaymatrix: rotation of -90.00 degrees
At least one output file must be specified
"""

DECODE_OUTPUT = """\
Input #0, avi, from 'testVideo.avi':
  Duration: N/A, start: 0.000000, bitrate: N/A
  Stream #0:0: Video: mpeg4 (Simple Profile) (FMP4 / 0x34504D46), yuv420p, 1280x720 [SAR 1:1 DAR 16:9], 25 fps, 25 tbr, 25 tbn
Output #0, null, to 'pipe:':
frame=  120 fps=0.0 q=-0.0 size=N/A time=00:00:04.80 bitrate=N/A speed=9.52x
frame=  250 fps=0.0 q=-0.0 Lsize=N/A time=00:00:10.00 bitrate=N/A speed=10.1x
"""


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def probe_output() -> str:
    return PROBE_OUTPUT


@pytest.fixture()
def rotated_probe_output() -> str:
    return ROTATED_PROBE_OUTPUT


@pytest.fixture()
def decode_output() -> str:
    return DECODE_OUTPUT
