from __future__ import annotations

from typing import List, Optional

from etta_scaffold.models import ValidationResult


class ScaffoldError(Exception):
    code = "SCAFFOLD_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(ScaffoldError):
    code = "USAGE"


class InvalidItemPath(ScaffoldError):
    """
    Item path rejected by the resolver. Raised before anything is created on disk.
    """

    code = "INVALID_ITEM_PATH"

    def __init__(self, item_path: str, results: Optional[List[ValidationResult]] = None):
        self.item_path = item_path
        self.results: List[ValidationResult] = list(results or [])
        details = "; ".join(f"{r.code}: {r.message}" for r in self.results)
        msg = f"invalid item path {item_path!r}"
        if details:
            msg = f"{msg} ({details})"
        super().__init__(msg)


class ScaffoldIOError(ScaffoldError):
    """
    Filesystem failure while writing the scaffold. The OSError is kept as __cause__.
    """

    code = "IO_ERROR"

    def __init__(self, step: str, path: str, error: OSError):
        self.step = step
        self.path = path
        self.error = error
        super().__init__(f"{step} failed: {path} ({error.strerror or error})")
