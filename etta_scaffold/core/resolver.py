from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import List, Optional

from etta_scaffold.config import (
    FRAMES_DIRNAME,
    ITEM_META_SUFFIX,
    PACK_META_FILENAME,
    SCAFFOLD_DIR_SUFFIX,
)
from etta_scaffold.errors import InvalidItemPath
from etta_scaffold.models import ScaffoldPaths, ValidationResult

logger = logging.getLogger(__name__)


def _name_of(item: PurePath) -> str:
    # ".." is a parent reference, never an item name
    name = item.name
    return "" if name == ".." else name


def validate_item_path(item_path: str) -> List[ValidationResult]:
    results: List[ValidationResult] = []
    item = PurePath(item_path)

    if not _name_of(item):
        results.append(
            ValidationResult(
                "ERROR",
                "ITEM_NAME_MISSING",
                "Item path has no final segment to use as the item name.",
                item_path,
            )
        )

    if item.is_absolute() or item.drive or item.root:
        results.append(
            ValidationResult(
                "ERROR",
                "ITEM_PATH_ABSOLUTE",
                "Item path must be relative to the pack root.",
                item_path,
            )
        )

    if ".." in item.parts:
        results.append(
            ValidationResult(
                "ERROR",
                "ITEM_PATH_TRAVERSAL",
                "Item path must not contain '..' segments.",
                item_path,
            )
        )

    return results


def validate_scaffold_inputs(description: str, item_path: str) -> List[ValidationResult]:
    results: List[ValidationResult] = []

    if not description:
        results.append(
            ValidationResult(
                "WARNING",
                "DESCRIPTION_EMPTY",
                "Description is empty; the pack root is the current directory.",
                None,
            )
        )

    results.extend(validate_item_path(item_path))
    return results


def extract_item_name(item_path: str) -> str:
    name = _name_of(PurePath(item_path))
    if not name:
        raise InvalidItemPath(item_path, [r for r in validate_item_path(item_path) if r.code == "ITEM_NAME_MISSING"])
    return name


def guard_item_path(item_path: str) -> PurePath:
    """
    Rejects item paths that have no item name or that could escape the pack root.
    """
    errors = [r for r in validate_item_path(item_path) if r.level.upper() == "ERROR"]
    if errors:
        raise InvalidItemPath(item_path, errors)
    return PurePath(item_path)


def resolve_scaffold_paths(
    description: str,
    item_path: str,
    base_dir: Optional[str] = None,
) -> ScaffoldPaths:
    """
    Derives every output path from the two inputs. Pure: nothing is read from or
    written to disk, so an InvalidItemPath always precedes any filesystem effect.

    The description is used verbatim as the root directory name, relative to
    base_dir (default: the working directory) unless it is absolute.
    """
    item = guard_item_path(item_path)
    name = item.name

    root = Path(base_dir) / description if base_dir else Path(description)
    scaffold_dir = root / item.parent / f"{name}{SCAFFOLD_DIR_SUFFIX}"

    paths = ScaffoldPaths(
        description=description,
        item_name=name,
        root_dir=root,
        scaffold_dir=scaffold_dir,
        frames_dir=scaffold_dir / FRAMES_DIRNAME,
        pack_meta_file=root / PACK_META_FILENAME,
        item_meta_file=scaffold_dir / f"{name}{ITEM_META_SUFFIX}",
    )
    logger.debug("Resolved %r -> %s", item_path, paths.scaffold_dir)
    return paths
