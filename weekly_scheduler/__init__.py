"""Single-week appointment scheduler engine."""

__version__ = "1.0.0"
