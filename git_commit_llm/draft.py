"""Draft commit message held in a temporary file for the editor."""

import hashlib
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from git_commit_llm.errors import TempFileError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModificationMarker:
    """Snapshot used to tell whether the user saved the draft.

    Any save bumps the mtime. The digest catches edits that land within the
    same timestamp tick.
    """
    mtime_ns: int
    size: int
    digest: str

    @classmethod
    def capture(cls, path: str | Path) -> 'ModificationMarker':
        try:
            stat = os.stat(path)
            with open(path, 'rb') as f:
                digest = hashlib.sha256(f.read()).hexdigest()
        except OSError as e:
            raise TempFileError(f"Could not read temporary file {path}: {e}")
        return cls(mtime_ns=stat.st_mtime_ns, size=stat.st_size, digest=digest)


def has_message_content(text: str) -> bool:
    """True if some line is non-empty and does not start with `#`."""
    return any(line and not line.startswith('#') for line in text.splitlines())


class DraftMessage:
    """Temporary file that is removed when the `with` block exits, however it exits."""

    PREFIX = "git-commit-llm."
    SUFFIX = ".gitcommit"

    def __init__(self, directory: str | Path | None = None):
        self._directory = str(directory) if directory is not None else None
        self.path: Path | None = None

    def __enter__(self) -> 'DraftMessage':
        try:
            fd, name = tempfile.mkstemp(prefix=self.PREFIX, suffix=self.SUFFIX, dir=self._directory)
        except OSError as e:
            raise TempFileError(f"Failed to create temporary file: {e}")
        os.close(fd)
        self.path = Path(name)
        LOG.debug("Created draft %s", self.path)
        return self

    def __exit__(self, *exc_info) -> None:
        self.cleanup()

    def cleanup(self) -> None:
        if self.path is None:
            return
        try:
            self.path.unlink()
            LOG.debug("Removed draft %s", self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            # Log to stderr so temp files don't silently accumulate
            print(f"Warning: Could not delete temp file {self.path}: {e}", file=sys.stderr)
        self.path = None

    def write(self, text: str) -> None:
        try:
            self.path.write_text(text, encoding='utf-8')
        except OSError as e:
            raise TempFileError(f"Failed to write temporary file: {e}")

    def read(self) -> str:
        try:
            return self.path.read_text(encoding='utf-8', errors='replace')
        except OSError as e:
            raise TempFileError(f"Failed to read temporary file: {e}")

    def marker(self) -> ModificationMarker:
        return ModificationMarker.capture(self.path)
