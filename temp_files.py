#!/usr/bin/env python3
"""
Scoped temporary files for downloaded schedules.

Files live under <system temp dir>/sched and are removed when the
`with` block that owns them exits, whether or not the download worked.
"""

import tempfile
from pathlib import Path


TEMP_SUBDIR_NAME = "sched"


def temp_dir() -> Path:
    """Directory holding downloaded schedules, created if missing."""
    directory = Path(tempfile.gettempdir()) / TEMP_SUBDIR_NAME
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Opening the file will report the real problem
        pass
    return directory


class TempFile:
    """
    A file path owned by a single caller.

    Usage:
        with TempFile.get("sched.pdf") as temp_file:
            with temp_file.open_for_write() as f:
                f.write(data)
    """

    def __init__(self, path: Path):
        self.path = path

    @classmethod
    def get(cls, name: str) -> "TempFile":
        return cls(temp_dir() / name)

    def open_for_write(self):
        """Open the file for binary writing, truncating any old content."""
        return open(self.path, 'wb')

    def cleanup(self) -> None:
        """Remove the file. Safe to call more than once."""
        try:
            self.path.unlink()
        except OSError:
            pass

    def __enter__(self) -> "TempFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        return f"TempFile({str(self.path)!r})"


def acquire(name: str) -> TempFile:
    return TempFile.get(name)
