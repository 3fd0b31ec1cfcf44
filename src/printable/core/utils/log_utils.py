"""
Centralized Rich-based logging and console utilities for printable.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# --- Detect test mode (pytest or typer CliRunner) ---
IS_TEST = "pytest" in sys.modules or "click.testing" in sys.modules

# --- Create a stable console ---
# stderr keeps the formatter's own stdout clean.
# In test mode, use a dummy stream to avoid ValueError on closed stderr
if IS_TEST:
    from io import StringIO

    _fake_stream = StringIO()
    console = Console(file=_fake_stream, force_terminal=False)
else:
    console = Console(stderr=True)


# --- Configure logging safely ---
def make_handler(test_mode: bool = IS_TEST) -> logging.Handler:
    """Return the root handler; every log line goes to stderr."""
    if test_mode:
        # Plain StreamHandler for pytest / typer tests
        return logging.StreamHandler(sys.stderr)
    return RichHandler(console=console, rich_tracebacks=True, markup=True)


if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[make_handler()],
    )

# --- Global project logger ---
log = logging.getLogger("printable")


def set_verbosity(log, verbose: bool) -> None:
    """Adjust global log level based on verbosity flag."""
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    log.debug(f"Log level set to {'DEBUG' if verbose else 'INFO'}.")
