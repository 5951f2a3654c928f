"""Screen-level command dispatch.

Each screen decides what a recognized command means for it. Screens register
a handler per command type; commands a screen has no handler for are ignored,
while unrecognized input is always surfaced back to the user.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from fitvoice.core.constants import SCREEN_ACTIONS
from fitvoice.core.describe import describe
from fitvoice.core.models import Command, CommandType

Handler = Callable[[Command], Optional[str]]


class CommandDispatcher:
    def __init__(self, name: str = "") -> None:
        self.name = name
        self.handlers: Dict[CommandType, Handler] = {}
        self._unknown_handler: Optional[Handler] = None

    def register(self, command_type: CommandType, handler: Handler) -> None:
        """Register a handler for a recognized command type.

        The handler receives the command and may return feedback text for
        the user.
        """
        if command_type is CommandType.UNKNOWN:
            raise ValueError("Use register_unknown() for unrecognized commands")
        self.handlers[command_type] = handler

    def register_unknown(self, handler: Handler) -> None:
        self._unknown_handler = handler

    def handles(self, command_type: CommandType) -> bool:
        return command_type in self.handlers

    def dispatch(self, command: Command) -> Optional[str]:
        if command.type is CommandType.UNKNOWN:
            if self._unknown_handler is not None:
                return self._unknown_handler(command)
            return describe(command)

        handler = self.handlers.get(command.type)
        if handler is None:
            return None
        return handler(command)


def _action_handler(action: str) -> Handler:
    def _handle(command: Command) -> Optional[str]:
        return action

    return _handle


def screen_dispatcher(screen: str) -> CommandDispatcher:
    """Build the dispatcher for one of the app screens."""
    key = screen.strip().lower()
    actions = SCREEN_ACTIONS.get(key)
    if actions is None:
        known = ", ".join(sorted(SCREEN_ACTIONS))
        raise ValueError(f"Unknown screen: {screen} (expected one of: {known})")

    dispatcher = CommandDispatcher(name=key)
    for tag, action in actions.items():
        dispatcher.register(CommandType(tag), _action_handler(action))
    return dispatcher
