"""Commit Workflow - staged changes -> prompt -> draft -> editor -> commit -> push.

Each step either advances the run or raises the error for that step. Nothing
is retried and no step runs twice.
"""

import logging
from enum import Enum

from git_commit_llm.config import Config, RunConfig
from git_commit_llm.draft import DraftMessage, has_message_content
from git_commit_llm.errors import EditorAborted, EmptyMessage, ExitCode, NoChanges, PreviewCancelled
from git_commit_llm.output import bold, colorize_diff, dim, print_success
from git_commit_llm.prompts import PromptBuilder, PromptConfig

LOG = logging.getLogger(__name__)


class Stage(Enum):
    CHECKED = "checked"
    STAGED = "staged"
    DIFF_READY = "diff-ready"
    PREVIEWED = "previewed"
    PROMPT_BUILT = "prompt-built"
    DEBUG_EXIT = "debug-exit"
    GENERATED = "generated"
    REVIEWED = "reviewed"
    VALIDATED = "validated"
    COMMITTED = "committed"
    PUSHED = "pushed"
    DONE = "done"


class CommitWorkflow:
    """Runs one commit from already-checked preconditions.

    The repository, generator and editor are passed in; the CLI builds the
    real ones, tests pass fakes.
    """

    def __init__(self, run_config: RunConfig, settings: Config, repo, generator, editor,
                 acknowledge=input, draft_dir=None):
        self.run_config = run_config
        self.settings = settings
        self.repo = repo
        self.generator = generator
        self.editor = editor
        self._acknowledge = acknowledge
        self._draft_dir = draft_dir
        self.stage = Stage.CHECKED

    def _advance(self, stage: Stage) -> None:
        LOG.debug("%s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self) -> ExitCode:
        rc = self.run_config

        if rc.stage_all:
            self.repo.stage_all()
            self._advance(Stage.STAGED)

        if not self.repo.has_staged_changes():
            raise NoChanges("No changes staged for commit")
        diff = self.repo.staged_diff()
        self._advance(Stage.DIFF_READY)

        if rc.show_diff:
            self._preview(diff)
            self._advance(Stage.PREVIEWED)

        prompt = self.build_prompt(diff)
        self._advance(Stage.PROMPT_BUILT)

        if rc.debug:
            print(prompt)
            self._advance(Stage.DEBUG_EXIT)
            return ExitCode.SUCCESS

        with DraftMessage(self._draft_dir) as draft:
            draft.write(self.generator.generate(prompt, rc.model))
            self._advance(Stage.GENERATED)

            self._review(draft)
            self._advance(Stage.REVIEWED)

            if not has_message_content(draft.read()):
                raise EmptyMessage("Commit message empty or only contains comments, aborting")
            self._advance(Stage.VALIDATED)

            self.repo.commit(draft.path)
            self._advance(Stage.COMMITTED)

        short_hash, subject = self.repo.head_summary()
        print_success(f"Committed {bold(short_hash)} {subject}")

        if rc.push:
            self.repo.push()
            self._advance(Stage.PUSHED)
            print_success("Pushed")

        self._advance(Stage.DONE)
        return ExitCode.SUCCESS

    def build_prompt(self, diff: str) -> str:
        config = PromptConfig(
            branch=self.repo.current_branch(),
            major=self.run_config.major,
            subject_length=self.settings.subject_length,
            body_width=self.settings.body_width,
        )
        return PromptBuilder().build(diff, config)

    def _preview(self, diff: str) -> None:
        """Show the staged diff and wait for Enter."""
        print(colorize_diff(diff.rstrip('\n')))
        try:
            self._acknowledge(f"\n{dim('Press Enter to generate a message, Ctrl-C to cancel: ')}")
        except (KeyboardInterrupt, EOFError):
            print()
            raise PreviewCancelled("Cancelled at diff preview")

    def _review(self, draft: DraftMessage) -> None:
        before = draft.marker()
        self.editor.edit(draft.path)
        if draft.marker() == before:
            raise EditorAborted("Commit message not saved in editor, aborting")
