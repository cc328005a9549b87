"""Map item file discovery and loading."""

import logging
from pathlib import Path
from typing import Iterable, Union

import nbtlib
from nbtlib import Compound

from .errors import ExtractionError, LoadError
from .extract import ExtractionResult, extract_tile
from .types import MapTile

logger = logging.getLogger(__name__)


def resolve_map_files(paths: Iterable[Union[str, Path]]) -> list[Path]:
    """Expand command line paths into the map files to read.

    A file path is used as is. A directory contributes the regular files
    directly inside it, in name order; its subdirectories are skipped.

    Raises:
        LoadError: If a path does not exist
    """
    files: list[Path] = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            entries = sorted(entry for entry in path.iterdir() if entry.is_file())
            logger.debug(f"{path}: {len(entries)} files")
            files.extend(entries)
        elif path.exists():
            files.append(path)
        else:
            raise LoadError(str(path), "no such file or directory")
    return files


def load_map(path: Union[str, Path]) -> Compound:
    """Decode a (usually gzipped) map item file into its root compound.

    Raises:
        LoadError: If the file can't be read or isn't valid NBT
    """
    path = Path(path)
    try:
        tree = nbtlib.load(path)
    except OSError as e:
        raise LoadError(str(path), e.strerror or str(e)) from e
    except Exception as e:
        # nbtlib reports corrupt data through assorted builtin exceptions
        raise LoadError(str(path), f"invalid NBT data ({type(e).__name__}: {e})") from e

    logger.debug(f"Decoded {path}")
    return tree


def read_map(path: Union[str, Path]) -> MapTile:
    """Load a map item file and extract its tile.

    Raises:
        LoadError: If the file can't be decoded
        ExtractionError: If the decoded tree isn't a valid map item
    """
    return extract_tile(load_map(path), source=str(path))


def read_maps(paths: Iterable[Union[str, Path]], strict: bool = False) -> list[ExtractionResult]:
    """Read every map file, collecting failures instead of stopping.

    Args:
        paths: Map files to read
        strict: Re-raise the first failure instead of recording it

    Returns:
        One result per file, in input order
    """
    results: list[ExtractionResult] = []
    for path in paths:
        try:
            tile = read_map(path)
        except (LoadError, ExtractionError) as e:
            if strict:
                logger.error(f"Stopping at {e}")
                raise
            logger.warning(f"Skipping {e}")
            results.append(ExtractionResult(source=str(path), error=e))
            continue

        logger.debug(f"{path}: scale {tile.scale}, dimension {tile.dimension!r}, center {tile.center}")
        results.append(ExtractionResult(source=str(path), tile=tile))

    return results
