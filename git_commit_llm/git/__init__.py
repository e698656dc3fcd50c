"""Git Operations Package"""

from git_commit_llm.git.repository import GitRepository

__all__ = [
    "GitRepository",
]
