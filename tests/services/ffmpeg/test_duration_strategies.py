from datetime import timedelta

import pytest

from ffscope.common.process.runner import Capture
from ffscope.domain.errors import DurationUnknown
from ffscope.services.ffmpeg.duration import (
    PRECISE,
    PRECISE_ONLY,
    QUICK,
    QUICK_THEN_PRECISE,
    resolve_duration,
)


class _Invoker:
    """Answers decode invocations (`-f null`) and plain probes with canned stderr."""

    def __init__(self, probe: str, decode: str):
        self.probe, self.decode = probe, decode
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        if "null" in args:
            return Capture(stderr=self.decode.encode(), returncode=0)
        return Capture(stderr=self.probe.encode(), returncode=1)


def test_quick_strategy_reads_container_header(probe_output, decode_output):
    inv = _Invoker(probe_output, decode_output)
    assert resolve_duration(inv, "in.avi", QUICK_THEN_PRECISE) == timedelta(seconds=10)
    assert inv.calls == [["-i", "in.avi"]]


def test_quick_falls_back_to_precise_when_header_has_no_duration(decode_output):
    inv = _Invoker("  Duration: N/A, start: 0.000000, bitrate: N/A\n", decode_output)
    assert resolve_duration(inv, "in.avi", QUICK_THEN_PRECISE) == timedelta(seconds=10)
    assert inv.calls == [["-i", "in.avi"], ["-i", "in.avi", "-f", "null", "-"]]


def test_precise_only_never_probes_header(probe_output, decode_output):
    inv = _Invoker(probe_output, decode_output)
    resolve_duration(inv, "in.avi", PRECISE_ONLY)
    assert inv.calls == [["-i", "in.avi", "-f", "null", "-"]]


def test_all_strategies_failing_raises_duration_unknown():
    inv = _Invoker("garbage", "more garbage")
    with pytest.raises(DurationUnknown):
        resolve_duration(inv, "in.avi", QUICK_THEN_PRECISE)
    assert len(inv.calls) == 2


def test_precise_is_last_resort_in_every_chain():
    for chain in (PRECISE_ONLY, QUICK_THEN_PRECISE):
        assert chain[-1] is PRECISE
    assert QUICK_THEN_PRECISE[0] is QUICK



def test_killed_decode_does_not_report_partial_progress():
    def invoke(args):
        return Capture(stderr=b"frame=   50 time=00:00:02.00 bitrate=N/A\n", error="timed out after 1s")

    with pytest.raises(DurationUnknown) as ei:
        PRECISE.run(invoke, "in.avi")
    assert "time=00:00:02.00" in ei.value.output
    with pytest.raises(DurationUnknown):
        resolve_duration(invoke, "in.avi", QUICK_THEN_PRECISE)


def test_nonzero_exit_still_parses():
    def invoke(args):
        return Capture(stderr=b"  Duration: 00:00:10.00, start: 0.000000, bitrate: 4010 kb/s\n", returncode=1)

    assert QUICK.run(invoke, "in.avi") == timedelta(seconds=10)
