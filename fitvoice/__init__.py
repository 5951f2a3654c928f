"""Voice command intent parsing for the fitness tracker."""

__version__ = "0.1.0"
