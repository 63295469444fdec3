from __future__ import annotations

import json
from typing import Any, Dict

from etta_scaffold.config import PACK_FORMAT

ITEM_MCMETAX_CONTENT = (
    "[animation]\n"
    "frametime: 1\n"
    "\n"
    "[fallback]\n"
    "frame: 0\n"
)


def build_pack_mcmeta_dict(description: str, pack_format: int = PACK_FORMAT) -> Dict[str, Any]:
    return {
        "pack": {
            "pack_format": pack_format,
            "description": description,
        }
    }


def render_pack_mcmeta(description: str) -> str:
    """
    pack.mcmeta text. The description goes through the JSON encoder, so quotes,
    backslashes and control characters are escaped rather than breaking the file.
    """
    return json.dumps(build_pack_mcmeta_dict(description), indent=2, ensure_ascii=False) + "\n"


def render_item_mcmetax() -> str:
    return ITEM_MCMETAX_CONTENT
