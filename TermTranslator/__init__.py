"""Command-line Google translate client with a persisted default language pair."""

__version__ = "0.1.0"
