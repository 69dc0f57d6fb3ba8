"""CLI for process command-line context extraction."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from proccontext.batch import ParseOutcome, parse_many, parse_one
from proccontext.config import load_config, ProcContextConfig
from proccontext.exporters import JSONExporter, CSVExporter

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )


def render_table(outcomes: List[ParseOutcome], cfg: ProcContextConfig) -> None:
    """Print outcomes as a rich table."""
    table = Table(title="Process Context")
    table.add_column("Executable", style="cyan")
    table.add_column("Runtime")
    table.add_column("Identity", style="green")
    if cfg.output.show_args:
        table.add_column("Args")
    table.add_column("Tag", style="magenta")
    table.add_column("Error", style="red")

    for outcome in outcomes:
        cmd = outcome.command
        payload = cmd.payload if cmd else None
        row = [
            cmd.execute_path if cmd else outcome.line,
            cmd.runtime.value if cmd and cmd.runtime else "-",
            (cmd.identity or "-") if cmd else "-",
        ]
        if cfg.output.show_args:
            row.append(" ".join(payload.args if payload else (cmd.args if cmd else [])))
        row.append(outcome.tag(cfg.naming.tag_prefix) or "-")
        row.append(str(outcome.error) if outcome.error else "")
        # cells hold raw command-line text, never markup
        table.add_row(*(Text(cell) for cell in row))

    console.print(table)


def export_outcomes(outcomes: List[ParseOutcome], cfg: ProcContextConfig, out: Optional[str]) -> None:
    """Write outcomes in the configured format, to ``out`` or stdout."""
    fmt = cfg.output.format
    prefix = cfg.naming.tag_prefix

    if fmt == "table":
        render_table(outcomes, cfg)
        if out:
            JSONExporter(prefix).export(outcomes, Path(out))
    elif fmt == "json":
        exporter = JSONExporter(prefix)
        if out:
            exporter.export(outcomes, Path(out))
        else:
            click.echo(json.dumps(exporter.to_data(outcomes), indent=2, default=str))
    elif fmt == "csv":
        exporter = CSVExporter(prefix)
        if out:
            exporter.export(outcomes, Path(out))
        else:
            exporter.write(outcomes, sys.stdout)

    if out:
        err_console.print(Text(f"Results saved to: {Path(out).absolute()}", style="dim"))


@click.command()
@click.argument("command_line", nargs=-1)
@click.option("--file", "file_path", default=None, help="File with one command line per line ('-' for stdin)")
@click.option("--format", "output_format", type=click.Choice(["table", "json", "csv"]), default=None, help="Output format")
@click.option("--out", default=None, help="Write JSON/CSV results to this path")
@click.option("--config", default=None, help="Path to configuration file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(command_line: tuple, file_path: str, output_format: str, out: str, config: str, verbose: bool) -> None:
    """Process context extraction tool.

    Parses process command lines and reports the script, module, class or
    delegated command they actually run. Put '--' before a command line that
    starts with options.
    """
    configure_logging(verbose)

    cfg = load_config(config)
    if output_format:
        cfg.output.format = output_format

    if not command_line and not file_path:
        raise click.UsageError("Provide a COMMAND_LINE or --file")

    fallback = cfg.naming.fallback_to_executable

    if file_path:
        with click.open_file(file_path, "r") as f:
            outcomes = parse_many(f, fallback_to_executable=fallback)
        export_outcomes(outcomes, cfg, out)
        return

    outcome = parse_one(" ".join(command_line), fallback_to_executable=fallback)
    export_outcomes([outcome], cfg, out)
    if not outcome.ok:
        err_console.print(Text(f"Error: {outcome.error}", style="bold red"))
        sys.exit(1)


if __name__ == "__main__":
    main()
