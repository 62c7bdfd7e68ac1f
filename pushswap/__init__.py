"""Two-stack integer sorting with a restricted move set, plus small text, byte and list helpers."""

__version__ = "0.1.0"