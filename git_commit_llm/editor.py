"""The user's editor, run as a blocking subprocess on the draft file."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from git_commit_llm.errors import EditorAborted, EditorNotConfigured

LOG = logging.getLogger(__name__)


class Editor:
    """Editor command such as `vim` or `code --wait`."""

    def __init__(self, command: str):
        self.command = command

    @classmethod
    def from_environment(cls, environ=None) -> 'Editor':
        """Use $VISUAL, then $EDITOR. Neither set is an error."""
        environ = os.environ if environ is None else environ
        command = (environ.get('VISUAL') or '').strip() or (environ.get('EDITOR') or '').strip()
        if not command:
            raise EditorNotConfigured("Neither $VISUAL nor $EDITOR is set")
        return cls(command)

    def edit(self, path: str | Path) -> None:
        """Block until the editor exits. Non-zero exit raises EditorAborted."""
        try:
            argv = shlex.split(self.command)
        except ValueError as e:
            raise EditorAborted(f"Could not parse editor command '{self.command}': {e}")
        cmd = [*argv, str(path)]
        LOG.debug("Running editor: %s", ' '.join(cmd))
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise EditorAborted(f"Could not launch editor '{self.command}': {e}")
        if result.returncode != 0:
            raise EditorAborted(f"Editor closed with an error (exit status {result.returncode})")
