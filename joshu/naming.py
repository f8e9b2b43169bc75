"""Resolution of file name collisions at a destination."""

from itertools import count
from pathlib import Path


def rename_filename_conflict(path: str | Path) -> Path:
    """Return ``path`` or, if it exists, the first free ``<name>_<n>`` beside it."""
    path = Path(path)
    name = path.name
    if not name or name == "..":
        raise ValueError(f"path has no file name: {path}")
    candidate = path
    for index in count():
        if not candidate.exists():
            return candidate
        candidate = path.with_name(f"{name}_{index}")
    raise AssertionError("unreachable")