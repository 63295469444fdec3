from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class ValidationResult:
    level: str  # INFO | WARNING | ERROR
    code: str   # stable short identifier (e.g. ITEM_NAME_MISSING)
    message: str
    relpath: Optional[str] = None  # offending input path when applicable


@dataclass(frozen=True)
class ScaffoldPaths:
    description: str
    item_name: str
    root_dir: Path
    scaffold_dir: Path
    frames_dir: Path
    pack_meta_file: Path
    item_meta_file: Path


@dataclass(frozen=True)
class ScaffoldSummary:
    paths: ScaffoldPaths
    written: List[str] = field(default_factory=list)
    overwritten: List[str] = field(default_factory=list)
