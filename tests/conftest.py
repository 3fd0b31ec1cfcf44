"""
Global pytest configuration for printable tests.

Provides fake formatter executables, small data files and closes any
matplotlib figure left open by a test.
"""

import stat
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

FAKE_ENSCRIPT = """#!/bin/sh
# Record the arguments, one per line, then exit with the requested status.
printf '%s\\n' "$@" > "$FAKE_ENSCRIPT_LOG"
exit "${FAKE_ENSCRIPT_STATUS:-0}"
"""


@pytest.fixture(autouse=True)
def close_figures():
    """Close every matplotlib figure after each test, even on failure."""
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Never let the caller's formatter override leak into tests."""
    monkeypatch.delenv("PRINTABLE_ENSCRIPT", raising=False)


@pytest.fixture
def make_executable(tmp_path):
    """Factory writing an executable shell script into tmp_path."""

    def _make(name: str, body: str) -> Path:
        path = tmp_path / "bin" / name
        path.parent.mkdir(exist_ok=True)
        path.write_text(body)
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def fake_enscript(make_executable, tmp_path, monkeypatch):
    """
    A stand-in for enscript that logs its argv to 'calls.log'.

    Returns (executable, log_path). Set FAKE_ENSCRIPT_STATUS to change
    its exit status.
    """
    log_path = tmp_path / "calls.log"
    monkeypatch.setenv("FAKE_ENSCRIPT_LOG", str(log_path))
    return make_executable("enscript", FAKE_ENSCRIPT), log_path


@pytest.fixture
def code_file(tmp_path) -> Path:
    path = tmp_path / "hello.py"
    path.write_text('print("hello")\n')
    return path


@pytest.fixture
def poses_file(tmp_path) -> Path:
    """Roll, pitch and yaw samples, as written by the pose sampler."""
    path = tmp_path / "poses.dat"
    path.write_text(
        "# roll pitch yaw\n"
        "1.5 -2.0 45.0\n"
        "0.5 3.0 -30.0\n"
        "-1.0 0.0 10.0\n"
        "2.0 1.0 89.0\n"
    )
    return path


@pytest.fixture
def grid_file(tmp_path) -> Path:
    path = tmp_path / "grid.dat"
    path.write_text("0 1 2\n3 4 5\n6 7 8\n9 10 11\n")
    return path
