"""
Validate a source file and hand it to the external formatter (enscript).

Paths are kept exactly as typed on the command line: the formatter receives
the same strings the user passed, and the existence check behaves like
``[ -f PATH ]``.
"""

import errno
import os
import subprocess
from collections.abc import Sequence

from printable.core.config import PrintConfig
from printable.core.errors import (
    FormatterNotExecutableError,
    FormatterNotFoundError,
    InputNotFoundError,
    InputNotReadableError,
    UsageError,
)
from printable.core.utils.log_utils import log


def parse_arguments(
    args: Sequence[str] | None, prog: str = "printable"
) -> tuple[str, str]:
    """Return (code_file, output_file); exactly two arguments are accepted."""
    args = list(args or [])
    if len(args) != 2:
        log.debug(f"Expected 2 arguments, got {len(args)}: {args}")
        raise UsageError(prog)
    return args[0], args[1]


def check_input_file(path: str | os.PathLike) -> None:
    """
    Ensure 'path' is an existing regular file readable by this process.

    Directories, other non-regular entries and paths with a trailing slash
    are reported as not found.
    """
    if not os.path.isfile(path):
        raise InputNotFoundError(path)
    if not os.access(path, os.R_OK):
        raise InputNotReadableError(path)


def build_command(
    config: PrintConfig, code_file: str | os.PathLike, output_file: str | os.PathLike
) -> list[str]:
    return [config.enscript_bin, "-o", os.fspath(output_file), os.fspath(code_file)]


def run_formatter(
    config: PrintConfig, code_file: str | os.PathLike, output_file: str | os.PathLike
) -> int:
    """
    Run the formatter and block until it exits.

    Returns
    -------
    int
        The formatter's exit status; death by signal N is mapped to 128 + N.
    """
    cmd = build_command(config, code_file, output_file)
    log.debug(f"Running: {cmd}")

    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as err:
        if err.errno == errno.ENOENT:
            raise FormatterNotFoundError(config.enscript_bin) from err
        raise FormatterNotExecutableError(config.enscript_bin, err) from err

    returncode = proc.returncode
    if returncode < 0:
        returncode = 128 - returncode
    log.debug(f"Formatter exited with status {returncode}")
    return returncode


def print_code_file(
    args: Sequence[str] | None,
    config: PrintConfig | None = None,
    prog: str = "printable",
) -> int:
    """Validate the command line, then format CODE into OUTPUT."""
    code_file, output_file = parse_arguments(args, prog=prog)
    check_input_file(code_file)

    if config is None:
        config = PrintConfig.from_env()
    return run_formatter(config, code_file, output_file)
