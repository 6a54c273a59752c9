from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.markup import escape
import typer

from batch_shot.batch import run_batch
from batch_shot.cli.common import verbose_callback
from batch_shot.config import get_config
from batch_shot.console import err_console
from batch_shot.models import NameMode, RunConfig
from batch_shot.sources import SourceError, read_urls

app = typer.Typer(
    name="batch-shot",
    help="Take full page screenshots of every url listed in a file.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Callback function to print the version of the batch-shot package.

    Args:
        value (bool): Boolean value to determine if the version should be printed.

    Raises:
        typer.Exit: If the value is True, the version will be printed and the program will exit.

    Example:
        version_callback(True)
    """
    if value:
        from batch_shot.__about__ import __version__

        typer.echo(f"{__version__}")
        raise typer.Exit()


@app.command()
def capture(
    source: Path = typer.Option(
        ...,
        "--source",
        "-s",
        help="Path to the file containing the list of URLs",
    ),
    name: NameMode = typer.Option(
        NameMode.title,
        "--name",
        "-n",
        case_sensitive=False,
        help="Build filenames from the page title or the url",
    ),
    width: int = typer.Option(1024, "--width", "-w", help="Viewport width"),
    height: Optional[int] = typer.Option(
        None,
        "--height",
        "-h",
        help="Viewport height, defaults to 75% of the width",
    ),
    trim: int = typer.Option(
        200,
        "--trim",
        "-t",
        help="Trim length for title/URL in filename (min: 8, max: 200)",
    ),
    delay: float = typer.Option(
        0,
        "--delay",
        "-d",
        help="Delay in milliseconds between processing URLs",
    ),
    output: Path = typer.Option(
        Path("."),
        "--output",
        "-o",
        help="Directory the screenshots are written to",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the page console messages",
    ),
) -> None:
    """
    Reads urls from SOURCE and saves a full page png for each one.
    A url that fails to load is reported and skipped.
    """
    try:
        run_config = RunConfig(
            source=source,
            name=name,
            width=width,
            height=height,
            trim=trim,
            delay=delay,
            output=output,
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            err_console.print(f"[red]Invalid --{field}:[/] {escape(error['msg'])}")
        raise typer.Exit(code=1)

    try:
        urls = read_urls(run_config.source)
    except SourceError as e:
        err_console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(code=1)

    try:
        run_batch(run_config, urls, get_config())
    except Exception as e:
        err_console.log(f"[red]An error occurred:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
