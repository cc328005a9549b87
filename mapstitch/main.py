#!/usr/bin/env python3
"""CLI entry point for the map compositor."""

import logging
import sys

import click

from .config import Config, OutputConfig, RenderConfig
from .errors import ExtractionError, LoadError, OutputError
from .loader import read_maps, resolve_map_files
from .render.output import OutputWriter
from .types import Dimension

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    default="out.png",
    help="Output filename (default: out.png)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every map file as it is read",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first unreadable or malformed map file",
)
@click.option(
    "--debug-outlines",
    is_flag=True,
    help="Outline each map's region, colored by scale",
)
@click.option(
    "--upscale",
    default=1,
    type=click.IntRange(min=1),
    help="Enlarge the output by this integer factor (default: 1)",
)
def render(
    paths: tuple[str, ...],
    output: str,
    verbose: bool,
    strict: bool,
    debug_outlines: bool,
    upscale: int,
):
    """Stitch Minecraft map item files into one PNG.

    Each PATH is either a map file (e.g. map_0.dat) or a directory whose
    files are all read. Subdirectories are not searched. Only overworld
    maps are drawn; finer scale maps are drawn over coarser ones.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(
        render=RenderConfig(upscale=upscale, debug_outlines=debug_outlines),
        output=OutputConfig(output_path=output),
        strict=strict,
    )

    try:
        files = resolve_map_files(paths)
        results = read_maps(files, strict=config.strict)
    except (LoadError, ExtractionError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    tiles = []
    failed = 0
    other = 0
    for result in results:
        if not result.ok:
            failed += 1
        elif result.tile.dimension == Dimension.OVERWORLD:
            tiles.append(result.tile)
        else:
            other += 1
            logger.debug(f"{result.source}: skipping dimension {result.tile.dimension!r}")

    click.echo(
        f"Read {len(results)} map files: {len(tiles)} overworld, "
        f"{other} other dimensions, {failed} skipped as invalid"
    )

    if not tiles:
        click.echo("Error: no overworld maps to render", err=True)
        sys.exit(1)

    output_writer = OutputWriter(output_config=config.output, render_config=config.render)

    try:
        saved = output_writer.save_composite(tiles)
    except OutputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Saved composite image: {saved}")


def main():
    """Main entry point."""
    render()


if __name__ == "__main__":
    main()
