"""
git-commit-llm

Draft commit messages for staged git changes with an external LLM command,
review them in your editor, then commit.
"""

__version__ = "1.0.0"

# Defaults shared by config, args and the generator wrapper
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_TOOL = "llm"
DETACHED_HEAD = "detached HEAD"
