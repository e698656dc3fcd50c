"""Prompt Construction Package"""

from git_commit_llm.prompts.builder import PromptBuilder, PromptConfig

__all__ = [
    "PromptBuilder",
    "PromptConfig",
]
