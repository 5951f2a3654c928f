"""Classification rule table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from fitvoice.core.config import ConfigError
from fitvoice.core.constants import (
    ALTERNATIVE_PHRASES,
    COMMAND_EXAMPLES,
    COMMAND_PATTERNS,
    DEFAULT_FUZZY_THRESHOLD,
)
from fitvoice.core.matchers import FuzzyMatcher, Matcher, RegexMatcher
from fitvoice.core.models import CommandType


@dataclass(frozen=True)
class Rule:
    """A matcher paired with the command it yields."""

    matcher: Matcher
    type: CommandType

    def matches(self, text: str) -> bool:
        return self.matcher.matches(text)


def build_rules(patterns: Iterable[Tuple[str, str]]) -> Tuple[Rule, ...]:
    """Build regex rules from ``(pattern, command type)`` pairs, keeping order."""
    return tuple(Rule(RegexMatcher(pattern), CommandType(tag)) for pattern, tag in patterns)


# Built once at import and shared read-only for the life of the process.
DEFAULT_RULES: Tuple[Rule, ...] = build_rules(COMMAND_PATTERNS)


def canonical_phrases() -> List[Tuple[str, CommandType]]:
    """Example and alternative phrasings for every recognized command."""
    phrases = [(phrase, CommandType(tag)) for phrase, tag, _, _ in COMMAND_EXAMPLES]
    phrases.extend((phrase, CommandType(tag)) for phrase, tag in ALTERNATIVE_PHRASES)
    return phrases


def _intent_from_name(name: str) -> CommandType:
    key = str(name).strip().upper().replace("-", "_").replace(" ", "_")
    try:
        command_type = CommandType(key)
    except ValueError:
        raise ConfigError(f"Unknown voice intent in config rules: {name!r}") from None
    if command_type is CommandType.UNKNOWN:
        raise ConfigError("Config rules cannot target the UNKNOWN intent")
    return command_type


def _configured_patterns(name: str, raw: Any) -> List[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, Sequence):
        raise ConfigError(f"Voice rule patterns must be a string or list, got {type(raw).__name__}")
    patterns = [str(item) for item in raw if str(item).strip()]
    if not patterns:
        raise ConfigError(f"Voice rule {name!r} has no non-blank patterns")
    return patterns


def _configured_rules(configured: Dict[str, Any]) -> List[Rule]:
    rules: List[Rule] = []
    for name, raw_patterns in configured.items():
        command_type = _intent_from_name(name)
        for pattern in _configured_patterns(name, raw_patterns):
            try:
                matcher = RegexMatcher(pattern)
            except re.error as exc:
                raise ConfigError(f"Invalid voice rule pattern {pattern!r}: {exc}") from exc
            rules.append(Rule(matcher, command_type))
    return rules


def fuzzy_rules(threshold: float = DEFAULT_FUZZY_THRESHOLD) -> List[Rule]:
    """Approximate-match rules for every canonical phrasing."""
    return [Rule(FuzzyMatcher(phrase, threshold), command_type) for phrase, command_type in canonical_phrases()]


def rules_from_config(config: Dict[str, Any]) -> Tuple[Rule, ...]:
    """Build the effective rule table: built-ins, configured patterns, then fuzzy fallbacks."""
    voice_cfg = config.get("voice", {})
    if not isinstance(voice_cfg, dict):
        raise ConfigError("[voice] config must be a table")

    rules: List[Rule] = list(DEFAULT_RULES)

    configured = voice_cfg.get("rules") or {}
    if not isinstance(configured, dict):
        raise ConfigError("[voice.rules] config must be a table of intent = [patterns]")
    rules.extend(_configured_rules(configured))

    if voice_cfg.get("fuzzy", False):
        try:
            threshold = float(voice_cfg.get("fuzzy_threshold", DEFAULT_FUZZY_THRESHOLD))
            rules.extend(fuzzy_rules(threshold))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid voice.fuzzy_threshold: {exc}") from exc

    return tuple(rules)
