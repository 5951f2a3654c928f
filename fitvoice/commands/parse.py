"""Single transcript classification command."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.markup import escape

from fitvoice.commands.common import (
    classification_payload,
    get_state,
    log_classification,
    print_json_payload,
)
from fitvoice.core.classify import classify_with_metadata
from fitvoice.core.config import resolve_screen
from fitvoice.core.describe import describe
from fitvoice.core.dispatch import screen_dispatcher


def parse_command(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Transcript text (quote it or pass words)"),
    screen: Optional[str] = typer.Option(
        None,
        help="Screen dispatching the command: home|workout-checklist|body-tracker|ai-coach",
    ),
    explain: bool = typer.Option(False, "--explain", help="Show which rule matched"),
) -> None:
    """Classify a transcript and show the resulting command."""
    state = get_state(ctx)
    transcript = " ".join(words)

    screen_name = resolve_screen(state.config, explicit=screen)
    try:
        dispatcher = screen_dispatcher(screen_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--screen") from exc

    classification = classify_with_metadata(transcript, state.rules)
    log_classification(state, transcript, classification)
    command = classification.command
    action = dispatcher.dispatch(command)

    payload = classification_payload(transcript, classification)
    payload["screen"] = screen_name
    payload["action"] = action

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo(f"command\t{command.type.value}")
        typer.echo(f"description\t{describe(command)}")
        typer.echo(f"screen\t{screen_name}")
        typer.echo(f"action\t{action or '-'}")
        if explain:
            typer.echo(f"rule\t{classification.rule_label or '-'}")
        return

    state.console.print(f"{command.type.value}: {escape(describe(command))}")
    if command.recognized:
        state.console.print(f"Screen {screen_name}: {action or 'no action on this screen'}")
    if explain:
        if classification.rule_index is None:
            state.console.print("No rule matched")
        else:
            state.console.print(
                f"Matched rule #{classification.rule_index + 1}: {escape(classification.rule_label or '')}"
            )
