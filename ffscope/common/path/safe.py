# ffscope/common/path/safe.py
from __future__ import annotations

from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve a media root directory."""
    return Path(root).expanduser().resolve()


def safe_join(root: Path | str, rel: Path | str) -> Path:
    """
    Join 'root' and a relative path safely, ensuring the result stays inside 'root'.
    Raises ValueError if traversal escapes the root.
    """
    r = resolve_root(root)
    p = (r / str(rel)).resolve()
    try:
        p.relative_to(r)
    except ValueError as exc:
        raise ValueError(f"path {p} escapes root {r}") from exc
    return p


def is_regular_file(path: Path | str) -> bool:
    """True for an existing file; False for missing paths and directories."""
    try:
        return Path(path).is_file()
    except OSError:
        return False

