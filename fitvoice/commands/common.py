"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, Dict

import typer
from rich.markup import escape

from fitvoice.core.describe import describe
from fitvoice.core.models import Classification
from fitvoice.core.state import CLIState


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def classification_payload(transcript: str, classification: Classification) -> Dict[str, Any]:
    """Serialize a classification together with its input and feedback text."""
    return {
        "transcript": transcript,
        "command": classification.command.to_dict(),
        "description": describe(classification.command),
        "rule": (
            {"index": classification.rule_index, "pattern": classification.rule_label}
            if classification.rule_index is not None
            else None
        ),
    }


def log_classification(state: CLIState, transcript: str, classification: Classification) -> None:
    """Emit rule-match diagnostics when running verbose.

    Skipped under ``--json`` so stdout stays parseable.
    """
    if not state.verbose or state.json_output:
        return
    if classification.rule_index is None:
        state.console.log(escape(f"No rule matched {transcript!r} ({len(state.rules)} rules checked)"))
        return
    state.console.log(
        escape(
            f"Rule #{classification.rule_index + 1} {classification.rule_label!r} "
            f"matched {transcript!r} -> {classification.command.type.value}"
        )
    )
