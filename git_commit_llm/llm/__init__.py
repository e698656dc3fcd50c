"""LLM Command Package"""

from git_commit_llm.llm.generator import MessageGenerator

__all__ = [
    "MessageGenerator",
]
