"""Command line entry point for ldoc-gen."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ldoc_gen.config import load_config
from ldoc_gen.converter import Converter
from ldoc_gen.observability.base import LoggingMetricsHook, NoOpMetricsHook

app = typer.Typer(
    name="ldoc-gen",
    help="Rewrite LuaCATS annotations into LDoc-ready sources.",
    add_completion=False,
)

logger = logging.getLogger(__name__)


@app.command()
def main(
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Directory to search for source files [default: .]"
    ),
    out_dir: Optional[Path] = typer.Option(
        None, "--out-dir", "-o", help="Where the .ldoc_gen directory is created"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config file"
    ),
    extension: Optional[str] = typer.Option(
        None, "--extension", help="Source file extension [default: .lua]"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Convert every source file under PATH into OUT_DIR/.ldoc_gen."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_config(
            config, source_dir=path, out_dir=out_dir, extension=extension
        )
    except (OSError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(1)

    metrics_hook = LoggingMetricsHook() if verbose else NoOpMetricsHook()
    converter = Converter(settings, metrics_hook=metrics_hook)

    try:
        report = converter.convert_tree()
    except OSError as exc:
        logger.error("Conversion aborted: %s", exc)
        typer.echo(f"Conversion aborted: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"Converted {len(report.converted)} files, {len(report.failed)} failed"
    )
