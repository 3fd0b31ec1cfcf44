from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass

import typer

from printable.core.config import PrintConfig
from printable.core.utils.log_utils import log, set_verbosity

# ---------- result model ----------


@dataclass(frozen=True)
class CheckResult:
    name: str
    ok: bool
    message: str
    fatal: bool = False


def _print_result(r: CheckResult) -> None:
    if r.ok:
        typer.echo(f"✅ {r.name}: {r.message}")
    else:
        icon = "❌" if r.fatal else "⚠️"
        typer.echo(f"{icon} {r.name}: {r.message}")


# ---------- subprocess helpers ----------


def _run(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    if proc.returncode != 0:
        stderr = (proc.stderr or "").strip() or "(no stderr)"
        raise RuntimeError(f"Command failed: {' '.join(cmd)}\n{stderr}")
    return proc


# ---------- enscript checks ----------


def check_formatter(config: PrintConfig) -> CheckResult:
    path = config.enscript_bin
    if os.path.isfile(path) and os.access(path, os.X_OK):
        return CheckResult(name="enscript", ok=True, message=f"found at {path}")

    on_path = shutil.which("enscript")
    if on_path is not None:
        return CheckResult(
            name="enscript",
            ok=False,
            message=f"{path} missing, but found at {on_path} "
            "(set PRINTABLE_ENSCRIPT or --enscript)",
            fatal=True,
        )
    return CheckResult(
        name="enscript", ok=False, message=f"{path} not found", fatal=True
    )


def check_formatter_version(config: PrintConfig) -> CheckResult:
    try:
        proc = _run([config.enscript_bin, "--version"])
    except (OSError, RuntimeError) as exc:
        return CheckResult(name="version", ok=False, message=str(exc), fatal=True)

    lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
    return CheckResult(
        name="version", ok=True, message=lines[0] if lines else "(no output)"
    )


# ---------- typer command ----------


def doctor(
    enscript: str | None = typer.Option(
        None,
        "--enscript",
        help="Formatter executable to check (default: $PRINTABLE_ENSCRIPT or /usr/bin/enscript).",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."
    ),
) -> None:
    """
    Check that the enscript formatter is installed and runs.

    Exit codes:
      0 = OK
      2 = fatal error(s)
    """
    typer.secho("printable environment check\n", bold=True)
    set_verbosity(log, verbose)
    config = PrintConfig.from_env(enscript)

    results: list[CheckResult] = [check_formatter(config)]
    if results[-1].ok:
        results.append(check_formatter_version(config))

    for r in results:
        _print_result(r)

    if any(not r.ok and r.fatal for r in results):
        typer.echo("\nEnvironment check failed.")
        raise typer.Exit(code=2)

    typer.echo("\nprintable environment looks OK.")
    raise typer.Exit(code=0)
