"""Command Line Interface"""

from collections import Counter
from pathlib import Path
from typing import Any, Dict, Optional

import click
from marshmallow import ValidationError

from imdtools.chart import Chart
from imdtools.formats import DUMPERS, LOADERS
from imdtools.formats.enum import Format
from imdtools.version import __version__

from .helpers import dumper_option, loader_option

input_format_option = click.option(
    "--input-format",
    "input_format",
    type=click.Choice(list(f.value for f in LOADERS.keys())),
    default=Format.IMD_JSON.value,
    show_default=True,
    help="Input file format",
)

strict_option = loader_option(
    "--strict",
    "strict",
    is_flag=True,
    help="Refuse files written for another version of the format",
)


@click.group()
@click.version_option(__version__)
def cli() -> None:
    """Check and rewrite IMD charts"""


@cli.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False))
@input_format_option
@strict_option
def check(
    src: str,
    input_format: str,
    loader_options: Optional[Dict[str, Any]] = None,
) -> None:
    """Load SRC and print a summary of the chart it holds"""
    chart = load(Path(src), Format(input_format), loader_options or {})
    click.echo(summary(chart))


@cli.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False))
@click.argument("dst", type=click.Path())
@input_format_option
@click.option(
    "-f",
    "--format",
    "output_format",
    default=Format.IMD_JSON.value,
    show_default=True,
    type=click.Choice(list(f.value for f in DUMPERS.keys())),
    help="Output file format",
)
@strict_option
@dumper_option(
    "--indent",
    "indent",
    type=click.IntRange(min=0),
    help="Indentation level of json based formats",
)
def normalize(
    src: str,
    dst: str,
    input_format: str,
    output_format: str,
    loader_options: Optional[Dict[str, Any]] = None,
    dumper_options: Optional[Dict[str, Any]] = None,
) -> None:
    """Load SRC, check it, and write it back to DST"""
    chart = load(Path(src), Format(input_format), loader_options or {})
    dumper = DUMPERS[Format(output_format)]
    files = dumper(chart, Path(dst), **(dumper_options or {}))
    for path, contents in files.items():
        with path.open("wb") as f:
            f.write(contents)


def load(path: Path, format_: Format, options: Dict[str, Any]) -> Chart:
    loader = LOADERS[format_]
    try:
        return loader(path, **options)
    except (ValueError, ValidationError) as e:
        raise click.ClickException(f"{path} : {type(e).__name__} : {e}")


def summary(chart: Chart) -> str:
    counts = Counter(a.type.value for a in chart.actions)
    chains = list(chart.hold_chains())
    return "\n".join(
        [
            f"{chart.name or '(untitled)'} [{chart.difficulty}]",
            f"duration : {chart.duration} ms, bpm : {chart.bpm}, "
            f"lanes : {chart.lane_count}",
            f"taps : {counts['tap']}, slides : {counts['slide']}, "
            f"holds : {counts['hold']}",
            f"hold chains : {len(chains)} "
            f"({sum(len(c) for c in chains)} segments)",
        ]
    )


if __name__ == "__main__":
    cli()
