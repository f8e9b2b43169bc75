"""Human-readable formatting of file sizes and modification times."""

from __future__ import annotations

from datetime import datetime, timezone

_FILE_UNITS = ("B", "K", "M", "G", "T", "E")
_CONV_RATE = 1024.0
_MTIME_FORMAT = "%Y-%m-%d %H:%M"


def file_size_to_string(file_size: int) -> str:
    """Format a byte count as a short, right-aligned size such as ``" 512 B"``."""
    if file_size < 0:
        raise ValueError(f"file size cannot be negative: {file_size}")

    size = float(file_size)
    index = 0
    while size > _CONV_RATE:
        size /= _CONV_RATE
        index += 1

    if index >= len(_FILE_UNITS):
        raise ValueError(f"file size too large to format: {file_size}")
    unit = _FILE_UNITS[index]

    if size >= 100.0:
        return f"{size:>4.0f} {unit}"
    if size >= 10.0:
        return f"{size:>4.1f} {unit}"
    return f"{size:>4.2f} {unit}"


def mtime_to_string(mtime: datetime | float | int) -> str:
    """Format a modification time in UTC as ``YYYY-MM-DD HH:MM``.

    ``mtime`` may be a POSIX timestamp or a datetime; naive datetimes are
    taken to be in UTC.
    """
    if isinstance(mtime, datetime):
        moment = mtime.replace(tzinfo=timezone.utc) if mtime.tzinfo is None else mtime
    else:
        moment = datetime.fromtimestamp(mtime, tz=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(_MTIME_FORMAT)