"""JSON report export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from fitvoice import __version__


def write_report(path: Path, payload: Dict[str, Any]) -> Path:
    """Write a classification report stamped with the tool version."""
    document = {"version": __version__, **payload}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
