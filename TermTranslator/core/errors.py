"""Exception hierarchy.

Config errors are soft: reads fall back to the default pair and write
failures are reported without stopping the run. Translation errors end the
invocation with a one-line message.
"""
from __future__ import annotations


class TermTranslatorError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(TermTranslatorError):
    pass


class ConfigReadError(ConfigError):
    pass


class ConfigWriteError(ConfigError):
    pass


class TranslationError(TermTranslatorError):
    pass


class NetworkError(TranslationError):
    """DNS, connection, timeout or body read failure."""


class UnexpectedStatusError(TranslationError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected status code: {status_code}")


class MalformedResponseError(TranslationError):
    """Body is not JSON or its top-level value is not an array."""


class NoTranslationFoundError(TranslationError):
    def __init__(self, message: str = "translation not found"):
        super().__init__(message)
