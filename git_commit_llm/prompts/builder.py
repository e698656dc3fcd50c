"""Prompt Builder - Construct the instruction sent to the generation tool."""

from dataclasses import dataclass

from git_commit_llm import DETACHED_HEAD


@dataclass
class PromptConfig:
    """Inputs that shape the prompt."""
    branch: str = DETACHED_HEAD
    major: bool = False
    subject_length: int = 50
    body_width: int = 72


class PromptBuilder:
    """Constructs prompts for simple (one line) or major (subject + body) messages."""

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            self._build_task_section(config),
            self._build_format_section(config),
            self._build_diff_section(diff),
            self._build_final_instructions(config),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_task_section(self, config: PromptConfig) -> str:
        kind = "a detailed" if config.major else "a single-line"
        return f"Write {kind} git commit message for this change on branch {config.branch}."

    def _build_format_section(self, config: PromptConfig) -> str:
        n = config.subject_length
        if not config.major:
            return f"""<format>
Use imperative mood and maximum {n} characters.
The whole message is exactly one line.
</format>"""

        return f"""<format>
First line: imperative summary (max {n} chars), no trailing period
Then one blank line
Then a body explaining what changed and why, with line breaks at {config.body_width} chars
</format>"""

    def _build_diff_section(self, diff: str) -> str:
        return "\n".join(["<changes>", diff.rstrip("\n"), "</changes>"])

    def _build_final_instructions(self, config: PromptConfig) -> str:
        shape = "subject line, blank line, body" if config.major else "single line"
        return f"""<instructions>
- Output only the raw commit message ({shape})
- No markdown formatting (no ```, no bold)
- No preamble like "Here's a commit message:"
- No explanation after the message
</instructions>"""
