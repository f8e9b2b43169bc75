"""Tracking of a running paste operation for display."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from joshu.fileops import FileOp, IoWorkerProgress
from joshu.formatting import file_size_to_string

_OP_NAMES = {FileOp.CUT: "Moving", FileOp.COPY: "Copying"}


class IoWorkerObserver:
    """Holds the worker thread of a paste and a status message for it."""

    def __init__(
        self,
        thread: threading.Thread,
        src: str | os.PathLike,
        dest: str | os.PathLike,
    ) -> None:
        self.thread = thread
        self.src = Path(src)
        self.dest = Path(dest)
        self.progress: IoWorkerProgress | None = None
        self.msg = ""

    def join(self) -> bool:
        """Wait for the worker thread; False if it could not be joined."""
        try:
            self.thread.join()
        except RuntimeError:
            return False
        return True

    def set_progress(self, progress: IoWorkerProgress) -> None:
        self.progress = progress

    def update_msg(self) -> None:
        """Rebuild the status message from the latest progress, if any."""
        progress = self.progress
        if progress is None:
            return
        processed = file_size_to_string(progress.bytes_processed)
        total = file_size_to_string(progress.total_bytes)
        self.msg = (
            f"{_OP_NAMES[progress.kind]} "
            f"({progress.files_processed + 1}/{progress.total_files}) "
            f"({processed}/{total}) completed"
        )