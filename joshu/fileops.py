"""Copying and moving files and directory trees with progress reporting."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from joshu.naming import rename_filename_conflict

Reporter = Callable[["IoWorkerProgress"], None]


class FileOp(Enum):
    """The kind of paste operation."""

    CUT = "cut"
    COPY = "copy"


@dataclass(frozen=True)
class IoWorkerOptions:
    """How a paste treats names that already exist at the destination."""

    overwrite: bool = False
    skip_exist: bool = False

    def __str__(self) -> str:
        return (
            f"overwrite={str(self.overwrite).lower()} "
            f"skip_exist={str(self.skip_exist).lower()}"
        )


@dataclass
class IoWorkerProgress:
    """Counts of files and bytes handled so far, and in total."""

    kind: FileOp
    files_processed: int
    total_files: int
    bytes_processed: int
    total_bytes: int


def _send(report: Reporter | None, progress: IoWorkerProgress) -> None:
    if report is not None:
        report(replace(progress))


def _destination(options: IoWorkerOptions, src: Path, dest: Path) -> Path:
    target = dest / src.name if src.name else dest
    if not options.overwrite:
        target = rename_filename_conflict(target)
    return target


class IoWorkerThread:
    """A queued paste of several paths into one destination directory."""

    def __init__(
        self,
        kind: FileOp,
        paths: Iterable[str | os.PathLike],
        dest: str | os.PathLike,
        options: IoWorkerOptions,
    ) -> None:
        self.kind = kind
        self.paths = [Path(p) for p in paths]
        self.dest = Path(dest)
        self.options = options

    def start(self, report: Reporter | None) -> IoWorkerProgress:
        """Run the paste, sending snapshots of progress to ``report``.

        Returns the final progress; raises ``OSError`` on the first failure.
        """
        total_files, total_bytes = self._query_number_of_items()
        progress = IoWorkerProgress(self.kind, 0, total_files, 0, total_bytes)
        step = recursive_cut if self.kind is FileOp.CUT else recursive_copy
        for path in self.paths:
            _send(report, progress)
            step(self.options, path, self.dest, report, progress)
        return progress

    def _query_number_of_items(self) -> tuple[int, int]:
        total_bytes = 0
        total_files = 0
        dirs: deque[Path] = deque()
        for path in self.paths:
            info = path.lstat()
            if stat.S_ISDIR(info.st_mode):
                dirs.append(path)
            else:
                total_bytes += info.st_size
                total_files += 1

        while dirs:
            directory = dirs.popleft()
            for entry in directory.iterdir():
                if entry.is_dir():
                    dirs.append(entry)
                else:
                    total_bytes += entry.lstat().st_size
                    total_files += 1
        return total_files, total_bytes


def recursive_copy(
    options: IoWorkerOptions,
    src: str | os.PathLike,
    dest: str | os.PathLike,
    report: Reporter | None,
    progress: IoWorkerProgress,
) -> None:
    """Copy ``src`` into directory ``dest``, updating ``progress`` in place."""
    src = Path(src)
    target = _destination(options, src, Path(dest))
    mode = src.lstat().st_mode

    if stat.S_ISDIR(mode):
        target.mkdir()
        for entry in src.iterdir():
            recursive_copy(options, entry, target, report, progress)
            _send(report, progress)
    elif stat.S_ISREG(mode):
        shutil.copyfile(src, target)
        shutil.copymode(src, target)
        progress.bytes_processed += target.stat().st_size
        progress.files_processed += 1
    elif stat.S_ISLNK(mode):
        os.symlink(os.readlink(src), target)
        progress.files_processed += 1


def recursive_cut(
    options: IoWorkerOptions,
    src: str | os.PathLike,
    dest: str | os.PathLike,
    report: Reporter | None,
    progress: IoWorkerProgress,
) -> None:
    """Move ``src`` into directory ``dest``, updating ``progress`` in place.

    A plain rename is tried first; across file systems the entry is copied
    and the original removed.
    """
    src = Path(src)
    target = _destination(options, src, Path(dest))
    info = src.lstat()
    mode = info.st_mode

    try:
        os.rename(src, target)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
    else:
        progress.bytes_processed += info.st_size
        progress.files_processed += 1
        return

    if stat.S_ISDIR(mode):
        target.mkdir()
        for entry in src.iterdir():
            recursive_cut(options, entry, target, report, progress)
        src.rmdir()
    elif stat.S_ISLNK(mode):
        os.symlink(os.readlink(src), target)
        src.unlink()
        progress.bytes_processed += info.st_size
        progress.files_processed += 1
    else:
        shutil.copyfile(src, target)
        shutil.copymode(src, target)
        copied = target.stat().st_size
        src.unlink()
        progress.bytes_processed += copied
        progress.files_processed += 1