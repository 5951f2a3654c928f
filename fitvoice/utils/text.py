"""Text helpers."""

from __future__ import annotations

from typing import Optional


def normalize_transcript(transcript: Optional[str]) -> str:
    """Trim surrounding whitespace; case and inner spacing are left to the rules."""
    return (transcript or "").strip()
