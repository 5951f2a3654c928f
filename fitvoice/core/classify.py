"""Voice transcript classification."""

from __future__ import annotations

from typing import Optional, Sequence

from fitvoice.core.models import Classification, Command
from fitvoice.core.rules import DEFAULT_RULES, Rule
from fitvoice.utils.text import normalize_transcript


def classify_with_metadata(
    transcript: Optional[str],
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> Classification:
    """Classify a transcript and report which rule matched.

    Rules are tried in order and the first match wins. When nothing matches
    the result is ``UNKNOWN`` carrying the trimmed transcript.
    """
    text = normalize_transcript(transcript)
    for index, rule in enumerate(rules):
        if rule.matches(text):
            return Classification(
                command=Command(rule.type),
                rule_index=index,
                rule_label=rule.matcher.label,
            )
    return Classification(command=Command.unknown(text))


def classify(transcript: Optional[str], rules: Sequence[Rule] = DEFAULT_RULES) -> Command:
    """Map a transcript to exactly one command."""
    return classify_with_metadata(transcript, rules).command
