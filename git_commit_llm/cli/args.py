"""CLI Argument Parsing"""

import argparse
import argcomplete

from git_commit_llm.errors import InvalidArguments


class ArgumentParser(argparse.ArgumentParser):
    """Raises InvalidArguments instead of printing usage and exiting 2."""

    def error(self, message):
        raise InvalidArguments(f"Invalid argument: {message}")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='git-commit-llm',
        description='Generate a commit message for staged changes with an LLM, review it in $EDITOR, then commit',
        epilog='Example: git-commit-llm --stage-all --major',
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument('-h', '--help', action='store_true', help='Show this help message and exit')
    parser.add_argument('-v', '--version', action='store_true', help='Show version and exit')

    # Workflow options
    parser.add_argument('-s', '--stage-all', action='store_true', help='Stage all changes (including untracked files) first')
    parser.add_argument('-m', '--major', action='store_true', help='Generate a detailed multi-line commit message')
    parser.add_argument('-o', '--model', type=str, metavar='NAME', help='Model passed to the generation tool')
    parser.add_argument('-p', '--push', action='store_true', help='Push after committing')
    parser.add_argument('-d', '--diff', action='store_true', help='Show the staged diff and wait before generating')
    parser.add_argument('-D', '--debug', action='store_true', help='Print the prompt and exit without calling the tool')

    # Diagnostics/config
    parser.add_argument('--verbose', action='count', default=0, help='Diagnostic logging to stderr (repeat for more)')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv=None, parser: ArgumentParser | None = None) -> argparse.Namespace:
    parser = parser or build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    if args.model is not None and not args.model.strip():
        raise InvalidArguments("Invalid argument: -o/--model requires a non-empty name")
    return args
