"""Batch transcript classification command."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from fitvoice.commands.common import (
    classification_payload,
    get_state,
    log_classification,
    print_json_payload,
)
from fitvoice.core.classify import classify_with_metadata
from fitvoice.exporters.json_export import write_report
from fitvoice.utils.parsing import load_transcripts


def _summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    by_command = Counter(row["command"]["type"] for row in results)
    return {
        "total": len(results),
        "recognized": len(results) - by_command.get("UNKNOWN", 0),
        "unknown": by_command.get("UNKNOWN", 0),
        "by_command": dict(by_command),
    }


def batch_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", help="Transcripts file (.json, .yaml or one per line)"),
    stdin: bool = typer.Option(False, "--stdin", help="Read transcripts from stdin"),
    output_file: Optional[Path] = typer.Option(None, "--output", help="Write JSON report to file"),
) -> None:
    """Classify many transcripts at once."""
    state = get_state(ctx)

    if file is None and not stdin:
        raise typer.BadParameter("Provide --file or --stdin")
    if file is not None and not file.exists():
        raise typer.BadParameter(f"File not found: {file}", param_hint="--file")

    stdin_text = sys.stdin.read() if stdin and file is None else ""
    transcripts = load_transcripts(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    if not transcripts:
        raise typer.BadParameter("No transcripts found in input")

    results: List[Dict[str, Any]] = []
    for transcript in transcripts:
        classification = classify_with_metadata(transcript, state.rules)
        log_classification(state, transcript, classification)
        results.append(classification_payload(transcript, classification))

    payload = {"results": results, "summary": _summary(results)}

    if output_file:
        write_report(output_file, payload)

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("transcript\tcommand\tdescription")
        for row in results:
            typer.echo(f"{row['transcript']}\t{row['command']['type']}\t{row['description']}")
        typer.echo(f"total\t{payload['summary']['total']}")
        typer.echo(f"unknown\t{payload['summary']['unknown']}")
        return

    table = Table(title=f"Transcripts ({len(results)} total)")
    table.add_column("Transcript")
    table.add_column("Command")
    table.add_column("Description")
    for row in results:
        table.add_row(escape(row["transcript"]), row["command"]["type"], escape(row["description"]))

    state.console.print(table)
    summary = payload["summary"]
    state.console.print(f"Recognized {summary['recognized']} of {summary['total']} transcripts")
    if output_file:
        state.console.print(f"Report written to: {output_file}")
