"""CLI Utility Functions"""

import logging
import signal
from contextlib import contextmanager

from git_commit_llm.errors import Terminated

LOG = logging.getLogger(__name__)

# SIGHUP does not exist on Windows
TERMINATION_SIGNALS = tuple(
    sig for sig in (getattr(signal, 'SIGTERM', None), getattr(signal, 'SIGHUP', None)) if sig is not None
)


def _raise_terminated(signum, frame):
    raise Terminated(f"Interrupted by {signal.Signals(signum).name}")


@contextmanager
def raise_on_termination(signals=TERMINATION_SIGNALS):
    """Turn termination signals into a Terminated exception for the duration.

    Raising lets every `with`/`finally` on the stack run, so the draft file
    is removed even when the process is killed with SIGTERM.
    """
    previous = {}
    for sig in signals:
        try:
            previous[sig] = signal.signal(sig, _raise_terminated)
        except ValueError:
            # Not the main thread; handlers can only be set there
            LOG.debug("Could not install handler for %s", sig)
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
