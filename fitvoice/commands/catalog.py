"""Rule table and phrase catalog commands."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from fitvoice.commands.common import get_state, print_json_payload
from fitvoice.core.classify import classify
from fitvoice.core.constants import ALTERNATIVE_PHRASES, COMMAND_EXAMPLES


def rules_command(ctx: typer.Context) -> None:
    """List the effective rule table in evaluation order."""
    state = get_state(ctx)
    rows = [
        {"index": index + 1, "pattern": rule.matcher.label, "command": rule.type.value}
        for index, rule in enumerate(state.rules)
    ]

    if state.json_output:
        print_json_payload(state, {"rules": rows})
        return

    if state.plain_output:
        typer.echo("index\tpattern\tcommand")
        for row in rows:
            typer.echo(f"{row['index']}\t{row['pattern']}\t{row['command']}")
        return

    table = Table(title=f"Rules ({len(rows)}, first match wins)")
    table.add_column("#", justify="right")
    table.add_column("Pattern")
    table.add_column("Command")
    for row in rows:
        table.add_row(str(row["index"]), escape(row["pattern"]), row["command"])
    state.console.print(table)


def examples_command(ctx: typer.Context) -> None:
    """List example voice commands and alternative phrasings."""
    state = get_state(ctx)

    commands = [
        {
            "phrase": phrase,
            "command": classify(phrase, state.rules).type.value,
            "action": action,
            "screens": screens,
        }
        for phrase, _, action, screens in COMMAND_EXAMPLES
    ]
    alternatives = [
        {"phrase": phrase, "command": classify(phrase, state.rules).type.value}
        for phrase, _ in ALTERNATIVE_PHRASES
    ]

    if state.json_output:
        print_json_payload(state, {"commands": commands, "alternatives": alternatives})
        return

    if state.plain_output:
        typer.echo("phrase\tcommand\taction\tscreens")
        for row in commands:
            typer.echo(f"{row['phrase']}\t{row['command']}\t{row['action']}\t{row['screens']}")
        for row in alternatives:
            typer.echo(f"{row['phrase']}\t{row['command']}\t-\t-")
        return

    table = Table(title="Available Commands")
    table.add_column("Say")
    table.add_column("Command")
    table.add_column("Does")
    table.add_column("Available on")
    for row in commands:
        table.add_row(f'"{row["phrase"]}"', row["command"], row["action"], row["screens"])
    state.console.print(table)

    alt_table = Table(title="Alternative Phrases")
    alt_table.add_column("Say")
    alt_table.add_column("Command")
    for row in alternatives:
        alt_table.add_row(f'"{row["phrase"]}"', row["command"])
    state.console.print(alt_table)
