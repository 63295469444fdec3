from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from etta_scaffold.core.mcmeta import render_item_mcmetax, render_pack_mcmeta
from etta_scaffold.core.resolver import resolve_scaffold_paths
from etta_scaffold.errors import ScaffoldIOError
from etta_scaffold.models import ScaffoldPaths, ScaffoldSummary

logger = logging.getLogger(__name__)

ProgressCb = Callable[[int, int, str], None]

TOTAL_STEPS = 3


def _write_text(path: Path, text: str, step: str, overwritten: List[str]) -> None:
    existed = path.is_file()
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise ScaffoldIOError(step, str(path), e) from e

    if existed:
        overwritten.append(str(path))
        logger.debug("Overwrote %s", path)
    else:
        logger.debug("Wrote %s", path)


def write_scaffold(
    paths: ScaffoldPaths,
    progress_cb: Optional[ProgressCb] = None,
) -> ScaffoldSummary:
    """
    Creates the frames directory (and every missing ancestor), then writes
    pack.mcmeta and the item .mcmetax file, overwriting existing files.

    Fails fast: the first OSError is raised as ScaffoldIOError and whatever was
    already created stays on disk.
    """
    written: List[str] = []
    overwritten: List[str] = []

    if progress_cb:
        progress_cb(1, TOTAL_STEPS, f"mkdir {paths.frames_dir}")
    try:
        paths.frames_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldIOError("Creating directories", str(paths.frames_dir), e) from e
    logger.debug("Created %s", paths.frames_dir)

    if progress_cb:
        progress_cb(2, TOTAL_STEPS, f"write {paths.pack_meta_file}")
    _write_text(paths.pack_meta_file, render_pack_mcmeta(paths.description), "Writing pack metadata", overwritten)
    written.append(str(paths.pack_meta_file))

    if progress_cb:
        progress_cb(3, TOTAL_STEPS, f"write {paths.item_meta_file}")
    _write_text(paths.item_meta_file, render_item_mcmetax(), "Writing item metadata", overwritten)
    written.append(str(paths.item_meta_file))

    return ScaffoldSummary(paths=paths, written=written, overwritten=overwritten)


def create_scaffold(
    description: str,
    item_path: str,
    base_dir: Optional[str] = None,
    progress_cb: Optional[ProgressCb] = None,
) -> ScaffoldSummary:
    paths = resolve_scaffold_paths(description, item_path, base_dir=base_dir)
    return write_scaffold(paths, progress_cb=progress_cb)
