from typing import Any, Dict

import pytest

from fitvoice.core.classify import classify
from fitvoice.core.config import ConfigError, load_config
from fitvoice.core.constants import COMMAND_PATTERNS
from fitvoice.core.matchers import FuzzyMatcher, RegexMatcher
from fitvoice.core.models import Command, CommandType
from fitvoice.core.rules import DEFAULT_RULES, Rule, canonical_phrases, rules_from_config


def test_default_rules_follow_pattern_table_order() -> None:
    assert isinstance(DEFAULT_RULES, tuple)
    assert [(rule.matcher.label, rule.type.value) for rule in DEFAULT_RULES] == COMMAND_PATTERNS


def test_default_rules_never_target_unknown() -> None:
    assert all(rule.type is not CommandType.UNKNOWN for rule in DEFAULT_RULES)


def test_every_recognized_command_has_a_rule_and_phrase() -> None:
    recognized = {member for member in CommandType if member is not CommandType.UNKNOWN}
    assert {rule.type for rule in DEFAULT_RULES} == recognized
    assert {command_type for _, command_type in canonical_phrases()} == recognized


def test_rule_is_immutable() -> None:
    rule = DEFAULT_RULES[0]
    with pytest.raises(Exception):
        rule.type = CommandType.ADD_SET  # type: ignore[misc]


def test_rules_from_default_config_match_builtins(tmp_path) -> None:
    rules = rules_from_config(load_config(tmp_path / "missing.toml"))
    assert rules == DEFAULT_RULES


def test_rules_from_config_appends_patterns_after_builtins() -> None:
    config: Dict[str, Any] = {"voice": {"rules": {"start-workout": ["let'?s\\s+go"], "ADD_SET": "one more"}}}
    rules = rules_from_config(config)
    assert rules[: len(DEFAULT_RULES)] == DEFAULT_RULES
    assert len(rules) == len(DEFAULT_RULES) + 2
    assert classify("Let's go", rules).type is CommandType.START_WORKOUT
    assert classify("one more", rules).type is CommandType.ADD_SET
    # Built-ins keep priority over configured phrasings.
    assert classify("let's go finish workout", rules).type is CommandType.FINISH_WORKOUT


@pytest.mark.parametrize(
    "config",
    [
        {"voice": {"rules": {"dance": ["boogie"]}}},
        {"voice": {"rules": {"unknown": ["huh"]}}},
        {"voice": {"rules": {"add_set": ["("]}}},
        {"voice": {"rules": {"add_set": 3}}},
        {"voice": {"rules": ["add_set"]}},
        {"voice": {"rules": {"add_set": ""}}},
        {"voice": {"rules": {"add_set": "   "}}},
        {"voice": {"rules": {"add_set": ["", " "]}}},
        {"voice": "fuzzy"},
        {"voice": {"fuzzy": True, "fuzzy_threshold": "high"}},
        {"voice": {"fuzzy": True, "fuzzy_threshold": 150}},
    ],
)
def test_rules_from_config_invalid_entries_raise(config: Dict[str, Any]) -> None:
    with pytest.raises(ConfigError):
        rules_from_config(config)


def test_rules_from_config_fuzzy_fallback() -> None:
    rules = rules_from_config({"voice": {"fuzzy": True, "fuzzy_threshold": 85}})
    assert len(rules) == len(DEFAULT_RULES) + len(canonical_phrases())
    assert all(isinstance(rule.matcher, FuzzyMatcher) for rule in rules[len(DEFAULT_RULES):])

    assert classify("strat workout").type is CommandType.UNKNOWN
    assert classify("strat workout", rules).type is CommandType.START_WORKOUT
    # Exact phrasing still resolves through the regex rules first.
    assert classify("next set", rules).type is CommandType.ADD_SET


def test_custom_rule_table_is_honored_in_order() -> None:
    rules = (
        Rule(RegexMatcher("workout"), CommandType.SHOW_TODAY_WORKOUT),
        Rule(RegexMatcher("start"), CommandType.START_WORKOUT),
    )
    assert classify("start workout", rules).type is CommandType.SHOW_TODAY_WORKOUT


@pytest.mark.parametrize("transcript", ["a", "I", "ok", "set", "rest", "workout"])
def test_fuzzy_fallback_keeps_short_fillers_unknown(transcript: str) -> None:
    rules = rules_from_config({"voice": {"fuzzy": True, "fuzzy_threshold": 85}})
    assert classify(transcript, rules) == Command.unknown(transcript)


def test_blank_string_rule_does_not_swallow_unknown() -> None:
    with pytest.raises(ConfigError, match="no non-blank patterns"):
        rules_from_config({"voice": {"rules": {"add_set": ""}}})
