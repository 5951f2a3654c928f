"""Human-readable feedback for classified commands."""

from __future__ import annotations

from fitvoice.core.constants import COMMAND_DESCRIPTIONS
from fitvoice.core.models import Command, CommandType


def describe(command: Command) -> str:
    """Return the confirmation text shown for a command."""
    template = COMMAND_DESCRIPTIONS[command.type.value]
    if command.type is CommandType.UNKNOWN:
        return template.format(text=command.text or "")
    return template
