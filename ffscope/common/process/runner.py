# ffscope/common/process/runner.py
from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from ffscope.common.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Capture:
    """
    Both output streams of one finished tool invocation.

    `returncode` is None when the process could not be started or had to be
    killed; `error` then says why.
    """
    stdout: bytes = b""
    stderr: bytes = b""
    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", "replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", "replace")


def select_output(capture: Capture) -> str:
    """
    Pick the stream that carries the tool's report.

    ffmpeg prints probe data to stderr and usually exits non-zero when no
    output file is given, so stdout only wins on success with content.
    """
    if capture.ok and capture.stdout:
        return capture.stdout_text
    return capture.stderr_text


def run_tool(binary: str, args: Sequence[str], *, timeout: Optional[float] = None) -> Capture:
    """
    Run `binary` with `args`, wait for it and capture stdout/stderr.

    Never raises for start/wait problems: a missing binary or an expired
    timeout come back as a Capture that is not `ok`.
    """
    cmd = [binary, *args]
    logger.debug("exec: %s", " ".join(shlex.quote(p) for p in cmd))
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
            check=False,  # caller decides what a non-zero exit means
        )
    except subprocess.TimeoutExpired as e:
        logger.warning("%s timed out after %ss", binary, timeout)
        return Capture(
            stdout=e.stdout or b"",
            stderr=e.stderr or b"",
            error=f"timed out after {timeout}s",
        )
    except OSError as e:
        logger.warning("Failed to execute %s: %s", binary, e)
        return Capture(error=str(e))

    return Capture(stdout=proc.stdout, stderr=proc.stderr, returncode=proc.returncode)
