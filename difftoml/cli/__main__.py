from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from ..core.diff import DiffOptions, diff_documents
from ..core.errors import DiffTomlError
from ..core.loader import load_document
from ..report import render_json, render_text

app = typer.Typer(help="Display the difference between two toml files")

_FORMATS = ("text", "json")


def run(first: str, second: str, options: DiffOptions) -> str:
    first_doc = load_document(first)
    second_doc = load_document(second)
    diff = diff_documents(first_doc, second_doc, exclude=options.exclude)
    if options.output_format == "json":
        return render_json(diff, display_equal=options.display_equal)
    return render_text(
        diff,
        first,
        second,
        display_equal=options.display_equal,
        color=options.color,
    )


@app.command()
def main(
    first: str = typer.Argument(..., metavar="FIRST", help="First toml file"),
    second: str = typer.Argument(..., metavar="SECOND", help="Second toml file"),
    display_equal: bool = typer.Option(
        False,
        "--display-equal",
        "-d",
        envvar="DIFFTOML_DISPLAY_EQUAL",
        help="Also display entries that are equal in the two files.",
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        "-e",
        envvar="DIFFTOML_EXCLUDE",
        help="Comma-separated keys to exclude, e.g. 'key1,key2.key3'. "
        "Any key containing one of them is left out.",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        envvar="DIFFTOML_COLOR",
        help="Colourise the output (default: when writing to a terminal).",
    ),
    output_format: str = typer.Option("text", "--format", "-f", help="text or json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    if output_format not in _FORMATS:
        raise typer.BadParameter(
            f"must be one of {', '.join(_FORMATS)}", param_hint="--format"
        )
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    options = DiffOptions(
        exclude=exclude,
        display_equal=display_equal,
        color=sys.stdout.isatty() if color is None else color,
        output_format=output_format,
    )

    try:
        report = run(first, second, options)
    except DiffTomlError as exc:
        typer.secho(f"ERROR: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if report:
        typer.echo(report, color=options.color)


if __name__ == "__main__":
    app()
