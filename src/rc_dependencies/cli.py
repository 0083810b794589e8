"""CLI interface for rc-dependencies."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from rc_dependencies import __version__
from rc_dependencies.config import ENV_VAR, TargetNames
from rc_dependencies.core.paths import PathResolutionError, resolve_root
from rc_dependencies.core.scanner import DependencyScanner
from rc_dependencies.models.scan_result import ScanResult
from rc_dependencies.utils import lossy_str


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _result_to_json(result: ScanResult) -> dict[str, Any]:
    return {
        "total": result.total_bytes,
        "human": result.human_total,
        "details": [
            {
                "child": lossy_str(e.name),
                "folder": lossy_str(e.path),
                "weight": e.size_bytes,
                "human": e.human,
            }
            for e in result.entries
        ],
    }


def _print_usage(prog: str, targets: TargetNames) -> None:
    click.echo(f"rc_dependencies v{__version__}")
    click.echo()
    click.echo("Find dependencies folders and their sizes")
    click.echo(f"    {json.dumps(list(targets))}")
    click.echo("And export to a json file (or print to terminal)")
    click.echo("You can change folders name in .bash_profile (or equiv) via")
    click.echo(f'    export {ENV_VAR}="{",".join(TargetNames())}"')
    click.echo("And (or equiv)")
    click.echo("    source ~/.bash_profile")
    click.echo()
    click.echo(f"Usage: {prog} <root_folder> [json_file]")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("root_folder", required=False)
@click.argument("output_file", required=False)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="rc_dependencies")
@click.pass_context
def main(ctx: click.Context, root_folder: str | None, output_file: str | None, verbose: int) -> None:
    """Find dependency folders below ROOT_FOLDER and report their sizes as JSON.

    The JSON is written to OUTPUT_FILE when given, otherwise printed.
    """
    _setup_logging(verbose)
    targets = TargetNames.from_env()

    if root_folder is None:
        _print_usage(ctx.info_name or "rc-dependencies", targets)
        return

    try:
        root = resolve_root(root_folder)
        result = DependencyScanner(targets).scan(root)
    except PathResolutionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    payload = json.dumps(_result_to_json(result), indent=2, ensure_ascii=False)

    if output_file is None:
        click.echo(payload)
        return

    try:
        Path(output_file).write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: cannot write {output_file}: {e.strerror or e}", err=True)
        sys.exit(1)
    click.echo(f"Data saved to {output_file}")
