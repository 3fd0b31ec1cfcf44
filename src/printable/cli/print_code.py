"""
printable: render a source file to PostScript through enscript.
"""

import click
import typer
from typer.core import TyperCommand

from printable.core.config import PrintConfig
from printable.core.errors import PrintableError, UsageError
from printable.core.printer import print_code_file
from printable.core.utils.log_utils import log, set_verbosity

app = typer.Typer(
    help="Render a source file into a printable document.", add_completion=False
)


class PrintCodeCommand(TyperCommand):
    """
    Command whose CODE and OUTPUT may look like options ('-weird.c').

    Only known options leading the command line are parsed as options;
    everything from the first other token on is positional. Any remaining
    parse problem is reported as the usage line with exit status 1.
    """

    def _split_leading_options(
        self, ctx: click.Context, args: list[str]
    ) -> list[str]:
        takes_value: dict[str, bool] = {}
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                for name in (*param.opts, *param.secondary_opts):
                    takes_value[name] = not (param.is_flag or param.count)

        leading: list[str] = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == "--":
                return leading + args[i:]
            name = arg.split("=", 1)[0]
            if name not in takes_value:
                break
            leading.append(arg)
            if takes_value[name] and "=" not in arg:
                if i + 1 == len(args):
                    # Missing option value, left for click to report.
                    return leading
                leading.append(args[i + 1])
                i += 1
            i += 1
        return [*leading, "--", *args[i:]]

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, self._split_leading_options(ctx, args))
        except click.UsageError as err:
            log.debug(f"Command line rejected: {err.format_message()}")
            typer.echo(str(UsageError()), err=True)
            raise typer.Exit(code=UsageError.exit_code) from err


def print_code(
    args: list[str] | None = typer.Argument(
        None,
        metavar="CODE OUTPUT",
        help="Source file to render and the output file to write.",
        show_default=False,
    ),
    enscript: str | None = typer.Option(
        None,
        "--enscript",
        help="Formatter executable (default: $PRINTABLE_ENSCRIPT or /usr/bin/enscript).",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."
    ),
):
    """
    Format CODE into OUTPUT with enscript.

    Exit codes:
      0 = OK (or the formatter's own status)
      1 = wrong argument count, missing or unreadable CODE
      126 = formatter cannot be executed
      127 = formatter not found
    """
    set_verbosity(log, verbose)

    try:
        returncode = print_code_file(args, config=PrintConfig.from_env(enscript))
    except PrintableError as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(code=err.exit_code) from err

    raise typer.Exit(code=returncode)


app.command(cls=PrintCodeCommand)(print_code)


# -------------------------
# Main entrypoint
# -------------------------
def main():
    """CLI entrypoint for printable."""
    app()


if __name__ == "__main__":
    main()
