"""Message Generator - run the external LLM command and capture its draft."""

import logging
import shutil
import subprocess

from git_commit_llm import DEFAULT_TOOL
from git_commit_llm.errors import GenerationFailed, ToolUnavailable

LOG = logging.getLogger(__name__)


class MessageGenerator:
    """Wraps a command-line LLM tool such as `llm`.

    The tool receives `--model <name>` and the prompt on standard input, and
    writes the candidate message to standard output.
    """

    DEFAULT_TIMEOUT = 300  # 5 minutes for slow models

    def __init__(self, tool: str = DEFAULT_TOOL, timeout: int | None = None):
        self.tool = tool
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self._path: str | None = None

    def ensure_available(self) -> str:
        """Resolve the tool on PATH, raising ToolUnavailable if it is missing."""
        path = shutil.which(self.tool)
        if path is None:
            raise ToolUnavailable(f"{self.tool} command not found. Please install it first")
        self._path = path
        return path

    def generate(self, prompt: str, model: str) -> str:
        """Return the tool's stdout. An empty result is not an error here."""
        cmd = [self._path or self.tool, '--model', model]
        LOG.debug("Running generator: %s (prompt: %d chars)", ' '.join(cmd), len(prompt))
        try:
            result = subprocess.run(
                cmd,
                input=prompt,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise GenerationFailed(f"{self.tool} timed out after {self.timeout}s")
        except OSError as e:
            raise GenerationFailed(f"Failed to run {self.tool}: {e}")

        if result.returncode != 0:
            LOG.debug("%s stderr: %s", self.tool, result.stderr)
            message = f"Failed to generate commit message using {self.tool} (exit status {result.returncode})"
            stderr_lines = result.stderr.strip().splitlines() if result.stderr else []
            if stderr_lines:
                message += f": {stderr_lines[-1].strip()}"
            raise GenerationFailed(message)
        return result.stdout
