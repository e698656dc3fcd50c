"""Terminal Output Formatting Package"""

import os
import sys


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    """Print a single-line error to stderr."""
    line = ' '.join(message.split())
    print(f"{error(CROSS)} {error('Error:')} {line}", file=sys.stderr)


def colorize_diff(diff: str) -> str:
    """Color added/removed lines and hunk headers of a unified diff."""
    if not COLORS_ENABLED:
        return diff
    lines = []
    for line in diff.split('\n'):
        if line.startswith(('+++', '---', 'diff --git', 'index ')):
            lines.append(_colorize(line, Colors.BOLD))
        elif line.startswith('@@'):
            lines.append(_colorize(line, Colors.CYAN))
        elif line.startswith('+'):
            lines.append(_colorize(line, Colors.GREEN))
        elif line.startswith('-'):
            lines.append(_colorize(line, Colors.RED))
        else:
            lines.append(line)
    return '\n'.join(lines)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "success", "error", "info", "dim", "bold",
    "print_success", "print_error",
    "colorize_diff",
]
