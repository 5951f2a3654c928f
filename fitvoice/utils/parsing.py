"""Parsing helpers for transcript input files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

_TRANSCRIPT_KEYS = ("transcript", "text")


def _plain_lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _transcript_items(raw_data: Any) -> List[str]:
    if isinstance(raw_data, dict):
        nested = raw_data.get("transcripts")
        if isinstance(nested, list):
            return _transcript_items(nested)
        raw_data = [raw_data]
    if not isinstance(raw_data, list):
        return []

    transcripts: List[str] = []
    for item in raw_data:
        if isinstance(item, str):
            transcripts.append(item)
        elif isinstance(item, dict):
            for key in _TRANSCRIPT_KEYS:
                value = item.get(key)
                if isinstance(value, str):
                    transcripts.append(value)
                    break
    return transcripts


def load_transcripts(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[str]:
    """Load transcripts from a JSON/YAML/plain-text file or stdin text.

    Structured input is a list of strings, a list of objects with a
    ``transcript`` (or ``text``) key, or an object holding such a list under
    ``transcripts``. Anything else is read as one transcript per non-blank line.
    """
    if file_path:
        text = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return _transcript_items(yaml.safe_load(text))
        if suffix == ".json":
            return _transcript_items(json.loads(text))
        return _plain_lines(text)

    if read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        try:
            return _transcript_items(json.loads(text))
        except json.JSONDecodeError:
            return _plain_lines(text)

    return []
