# PYTHON_ARGCOMPLETE_OK
"""CLI Main Entry Point"""

import logging
import sys

from git_commit_llm import __version__
from git_commit_llm.config import RunConfig, load_config, resolve_model, resolve_tool
from git_commit_llm.editor import Editor
from git_commit_llm.errors import CommitLLMError, ExitCode
from git_commit_llm.git import GitRepository
from git_commit_llm.llm import MessageGenerator
from git_commit_llm.logging_utils import configure_logging
from git_commit_llm.output import print_error
from git_commit_llm.workflow import CommitWorkflow

from git_commit_llm.cli.args import build_parser, parse_args
from git_commit_llm.cli.commands import display_config, run_install_completion
from git_commit_llm.cli.utils import raise_on_termination

LOG = logging.getLogger(__name__)


def _handle_subcommands(args, parser):
    """Handle flags that print something and exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.help:
        parser.print_help()
        return ExitCode.SUCCESS, True
    if args.version:
        print(f"{parser.prog} {__version__}")
        return ExitCode.SUCCESS, True
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return ExitCode.SUCCESS, False


def _build_run_config(args, config) -> RunConfig:
    return RunConfig(
        stage_all=args.stage_all,
        major=args.major,
        model=resolve_model(args.model, config),
        push=args.push,
        show_diff=args.diff,
        debug=args.debug,
    )


def _run(argv) -> int:
    repo = GitRepository.discover()

    parser = build_parser()
    args = parse_args(argv, parser)
    configure_logging(args.verbose)

    exit_code, should_exit = _handle_subcommands(args, parser)
    if should_exit:
        return exit_code

    config = load_config()
    run_config = _build_run_config(args, config)
    LOG.debug("Run config: %s", run_config)

    editor = Editor.from_environment()
    generator = MessageGenerator(tool=resolve_tool(config), timeout=config.timeout)
    generator.ensure_available()

    workflow = CommitWorkflow(run_config, config, repo, generator, editor)
    return workflow.run()


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    try:
        with raise_on_termination():
            return int(_run(argv))
    except CommitLLMError as e:
        print_error(str(e))
        return int(e.exit_code)
    except KeyboardInterrupt:
        print()
        print_error("Interrupted, aborting")
        return int(ExitCode.USER_ABORTED)
    except Exception as e:  # noqa: BLE001
        LOG.debug("Unexpected failure", exc_info=True)
        print_error(f"Unexpected error: {e}")
        return int(ExitCode.UNEXPECTED)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
