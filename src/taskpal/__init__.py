"""taskpal: a conversational task tracker."""

__version__ = "0.1.0"
