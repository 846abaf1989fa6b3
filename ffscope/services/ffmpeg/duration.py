# ffscope/services/ffmpeg/duration.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Callable, List, Sequence

from ffscope.common.logging import get_logger
from ffscope.common.process.runner import Capture
from ffscope.domain.enums.duration_method import DurationMethod
from ffscope.domain.errors import DurationUnknown
from ffscope.services.ffmpeg import commands, parsers

logger = get_logger(__name__)

# (args) -> Capture; the adapter binds binary and timeout
Invoke = Callable[[List[str]], Capture]


@dataclass(frozen=True)
class DurationStrategy:
    """One way of asking ffmpeg how long a file is."""
    method: DurationMethod
    build_args: Callable[[str | Path], List[str]]
    parse: Callable[[str], timedelta]

    def run(self, invoke: Invoke, path: str | Path) -> timedelta:
        capture = invoke(self.build_args(path))
        if capture.error is not None:
            # killed or never started: progress so far is not the length
            raise DurationUnknown(output=capture.stderr_text, returncode=capture.returncode)
        # both report on stderr whatever the exit status
        return self.parse(capture.stderr_text)


QUICK = DurationStrategy(
    method=DurationMethod.quick,
    build_args=commands.probe_args,
    parse=parsers.parse_container_duration,
)

PRECISE = DurationStrategy(
    method=DurationMethod.precise,
    build_args=commands.decode_args,
    parse=parsers.parse_progress_duration,
)

PRECISE_ONLY: tuple[DurationStrategy, ...] = (PRECISE,)
QUICK_THEN_PRECISE: tuple[DurationStrategy, ...] = (QUICK, PRECISE)


def resolve_duration(invoke: Invoke, path: str | Path, strategies: Sequence[DurationStrategy]) -> timedelta:
    """
    Try `strategies` in order and return the first duration that parses.
    Raises DurationUnknown once all of them failed.
    """
    for strategy in strategies:
        try:
            return strategy.run(invoke, path)
        except DurationUnknown:
            logger.debug("%s duration unavailable for %s", strategy.method, path)
    raise DurationUnknown()

