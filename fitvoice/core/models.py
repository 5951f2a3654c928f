"""Lightweight data models for voice commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class CommandType(str, Enum):
    """Closed set of recognized intents plus the unrecognized fallback."""

    START_WORKOUT = "START_WORKOUT"
    LOG_WEIGHT = "LOG_WEIGHT"
    SHOW_TODAY_WORKOUT = "SHOW_TODAY_WORKOUT"
    ADD_SET = "ADD_SET"
    FINISH_WORKOUT = "FINISH_WORKOUT"
    OPEN_BODY_TRACKER = "OPEN_BODY_TRACKER"
    START_REST_TIMER = "START_REST_TIMER"
    GENERATE_WORKOUT_PLAN = "GENERATE_WORKOUT_PLAN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Command:
    """A classified voice command.

    Recognized commands carry no payload. ``UNKNOWN`` carries the normalized
    transcript so callers can show what was misheard.
    """

    type: CommandType
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type is CommandType.UNKNOWN and self.text is None:
            raise ValueError("UNKNOWN commands must carry the transcript text")
        if self.type is not CommandType.UNKNOWN and self.text is not None:
            raise ValueError(f"{self.type.value} commands carry no text")

    @classmethod
    def unknown(cls, text: str) -> "Command":
        return cls(type=CommandType.UNKNOWN, text=text)

    @property
    def recognized(self) -> bool:
        return self.type is not CommandType.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"type": self.type.value}
        if self.type is CommandType.UNKNOWN:
            payload["text"] = self.text or ""
        return payload


@dataclass(frozen=True)
class Classification:
    """Classification result with the rule that produced it."""

    command: Command
    rule_index: Optional[int] = None
    rule_label: Optional[str] = None
