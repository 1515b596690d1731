"""Core value types, config persistence and errors."""
