"""Exit codes and the error types raised by each workflow step.

Every failure is terminal for the run. Errors are raised where the step
fails and turned into a single stderr line plus exit code by the CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status, one per failure cause."""
    SUCCESS = 0
    NO_CHANGES = 1
    NOT_A_REPOSITORY = 2
    GENERATION_FAILED = 3
    USER_ABORTED = 4
    COMMIT_FAILED = 5
    EDITOR_NOT_CONFIGURED = 6
    TEMP_FILE_ERROR = 7
    INVALID_ARGUMENTS = 8
    PUSH_FAILED = 9
    UNEXPECTED = 10


class CommitLLMError(Exception):
    """Base class for all expected failures."""
    exit_code = ExitCode.UNEXPECTED


class NotARepository(CommitLLMError):
    exit_code = ExitCode.NOT_A_REPOSITORY


class InvalidArguments(CommitLLMError):
    exit_code = ExitCode.INVALID_ARGUMENTS


class EditorNotConfigured(CommitLLMError):
    exit_code = ExitCode.EDITOR_NOT_CONFIGURED


class ToolUnavailable(CommitLLMError):
    exit_code = ExitCode.GENERATION_FAILED


class NoChanges(CommitLLMError):
    exit_code = ExitCode.NO_CHANGES


class GenerationFailed(CommitLLMError):
    exit_code = ExitCode.GENERATION_FAILED


class EditorAborted(CommitLLMError):
    """Editor failed, or closed without saving."""
    exit_code = ExitCode.USER_ABORTED


class EmptyMessage(CommitLLMError):
    exit_code = ExitCode.USER_ABORTED


class PreviewCancelled(CommitLLMError):
    exit_code = ExitCode.USER_ABORTED


class CommitFailed(CommitLLMError):
    exit_code = ExitCode.COMMIT_FAILED


class PushFailed(CommitLLMError):
    """Push rejected. The commit it follows is kept."""
    exit_code = ExitCode.PUSH_FAILED


class TempFileError(CommitLLMError):
    exit_code = ExitCode.TEMP_FILE_ERROR


class GitError(CommitLLMError):
    """A git command outside the named steps failed."""
    exit_code = ExitCode.UNEXPECTED


class Terminated(CommitLLMError):
    """Raised from a signal handler so cleanup runs on SIGTERM/SIGHUP."""
    exit_code = ExitCode.UNEXPECTED


__all__ = [
    "ExitCode",
    "CommitLLMError",
    "NotARepository",
    "InvalidArguments",
    "EditorNotConfigured",
    "ToolUnavailable",
    "NoChanges",
    "GenerationFailed",
    "EditorAborted",
    "EmptyMessage",
    "PreviewCancelled",
    "CommitFailed",
    "PushFailed",
    "TempFileError",
    "GitError",
    "Terminated",
]
