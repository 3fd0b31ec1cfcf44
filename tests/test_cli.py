import subprocess

import pytest
from typer.testing import CliRunner

from printable.cli import print_code as print_module
from printable.cli.main import app
from printable.core import printer as printer_module

runner = CliRunner()


def test_cli_help():
    """Ensure the CLI responds correctly to --help."""
    result = subprocess.run(
        ["printable-tools", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "Usage" in result.stdout


@pytest.mark.parametrize("args", [[], ["only_one.py"], ["a.py", "b.ps", "c"]])
def test_printable_wrong_argument_count(args):
    result = runner.invoke(print_module.app, args)

    assert result.exit_code == 1
    assert "usage: printable CODE OUTPUT" in result.output


def test_printable_missing_input(tmp_path):
    missing = tmp_path / "missing.py"
    result = runner.invoke(print_module.app, [str(missing), str(tmp_path / "o.ps")])

    assert result.exit_code == 1
    assert f"error: file '{missing}' not found" in result.output


def test_printable_unreadable_input(code_file, tmp_path, monkeypatch):
    monkeypatch.setattr(printer_module.os, "access", lambda path, mode: False)

    result = runner.invoke(print_module.app, [str(code_file), str(tmp_path / "o.ps")])

    assert result.exit_code == 1
    assert "is not readable" in result.output


def test_printable_delegates_to_formatter(fake_enscript, code_file, tmp_path):
    executable, log_path = fake_enscript
    out = tmp_path / "out.ps"

    result = runner.invoke(
        print_module.app,
        ["--enscript", str(executable), str(code_file), str(out)],
    )

    assert result.exit_code == 0, result.output
    assert log_path.read_text().splitlines() == ["-o", str(out), str(code_file)]


def test_printable_propagates_formatter_status(
    fake_enscript, code_file, tmp_path, monkeypatch
):
    executable, _ = fake_enscript
    monkeypatch.setenv("PRINTABLE_ENSCRIPT", str(executable))
    monkeypatch.setenv("FAKE_ENSCRIPT_STATUS", "5")

    result = runner.invoke(print_module.app, [str(code_file), str(tmp_path / "o.ps")])

    assert result.exit_code == 5


def test_printable_missing_formatter(code_file, tmp_path):
    result = runner.invoke(
        print_module.app,
        [
            "--enscript",
            str(tmp_path / "no-enscript"),
            str(code_file),
            str(tmp_path / "o.ps"),
        ],
    )

    assert result.exit_code == 127
    assert "formatter" in result.output


def test_print_subcommand_matches_standalone(fake_enscript, code_file, tmp_path):
    executable, log_path = fake_enscript
    out = tmp_path / "out.ps"

    result = runner.invoke(
        app, ["print", "--enscript", str(executable), str(code_file), str(out)]
    )
    assert result.exit_code == 0, result.output
    assert log_path.exists()

    result = runner.invoke(app, ["print"])
    assert result.exit_code == 1
    assert "usage:" in result.output


def test_print_verbose_flag_forwarded(fake_enscript, code_file, tmp_path, monkeypatch):
    executable, _ = fake_enscript
    calls = []
    monkeypatch.setattr(
        print_module, "set_verbosity", lambda logger, verbose: calls.append(verbose)
    )

    result = runner.invoke(
        print_module.app,
        ["-v", "--enscript", str(executable), str(code_file), str(tmp_path / "o.ps")],
    )

    assert result.exit_code == 0
    assert calls == [True]


def test_printable_dash_prefixed_missing_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(print_module.app, ["-weird.c", "out.ps"])

    assert result.exit_code == 1
    assert "error: file '-weird.c' not found" in result.output


def test_printable_dash_prefixed_input_reaches_formatter(
    fake_enscript, tmp_path, monkeypatch
):
    executable, log_path = fake_enscript
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-v.c").write_text("int x;\n")
    monkeypatch.setenv("PRINTABLE_ENSCRIPT", str(executable))

    result = runner.invoke(print_module.app, ["-v.c", "--out.ps"])

    assert result.exit_code == 0, result.output
    assert log_path.read_text().splitlines() == ["-o", "--out.ps", "-v.c"]


def test_printable_passes_paths_as_typed(
    fake_enscript, code_file, tmp_path, monkeypatch
):
    executable, log_path = fake_enscript
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(
        print_module.app,
        [f"--enscript={executable}", f"./{code_file.name}", "./out.ps"],
    )

    assert result.exit_code == 0, result.output
    assert log_path.read_text().splitlines() == ["-o", "./out.ps", "./hello.py"]


def test_printable_trailing_slash_is_not_found(code_file, tmp_path, monkeypatch):
    monkeypatch.setattr(
        printer_module.subprocess,
        "run",
        lambda *a, **kw: pytest.fail("formatter must not run"),
    )

    result = runner.invoke(print_module.app, [f"{code_file}/", str(tmp_path / "o.ps")])

    assert result.exit_code == 1
    assert "not found" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["a.py", "b.ps", "--bogus"],
        ["--bogus", "a.py", "b.ps"],
        ["--enscript"],
        ["--verbose=yes", "a.py", "b.ps"],
    ],
)
def test_printable_bad_options_are_usage_errors(args):
    result = runner.invoke(print_module.app, args)

    assert result.exit_code == 1
    assert "usage: printable CODE OUTPUT" in result.output


def test_printable_help_still_works():
    result = runner.invoke(print_module.app, ["--help"])

    assert result.exit_code == 0
    assert "CODE OUTPUT" in result.output


def test_printable_formatter_cannot_execute(
    make_executable, code_file, tmp_path
):
    formatter = make_executable("fmt", "echo hi\n")

    result = runner.invoke(
        print_module.app,
        ["--enscript", str(formatter), str(code_file), str(tmp_path / "o.ps")],
    )

    assert result.exit_code == 126
    assert "cannot be executed" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_print_subcommand_dash_prefixed_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["print", "-weird.c", "out.ps"])

    assert result.exit_code == 1
    assert "not found" in result.output
