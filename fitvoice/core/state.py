"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from rich.console import Console

from fitvoice.core.rules import Rule


@dataclass
class CLIState:
    """CLI runtime options, loaded configuration and the effective rule table."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    rules: Tuple[Rule, ...]
