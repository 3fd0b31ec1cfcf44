import typer

from printable.cli import doctor, plot, print_code

app = typer.Typer(help="printable: source printing and plotting tools")

app.command(name="print", cls=print_code.PrintCodeCommand)(print_code.print_code)
app.command(name="heatmap")(plot.heatmap)
app.command(name="histogram")(plot.histogram)
app.command(name="doctor")(doctor.doctor)


# -------------------------
# Main entrypoint
# -------------------------
def main():
    """CLI entrypoint for printable-tools."""
    app()


if __name__ == "__main__":
    main()
