"""Core value types shared by the config store, the client and the CLI.

Plain dataclasses only; no I/O happens here.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_LANG = "en"


@dataclass(frozen=True)
class LanguagePair:
    source: str = DEFAULT_LANG
    target: str = DEFAULT_LANG

    def reversed(self) -> "LanguagePair":
        return LanguagePair(source=self.target, target=self.source)

    def merged(self, source: Optional[str] = None, target: Optional[str] = None) -> "LanguagePair":
        """Return a copy where any explicitly given side replaces the stored one."""
        return LanguagePair(
            source=source if source else self.source,
            target=target if target else self.target,
        )

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


@dataclass(frozen=True)
class TranslationRequest:
    """Everything one invocation needs, resolved once at startup."""
    text: str
    pair: LanguagePair = LanguagePair()
    reverse: bool = False

    def effective_pair(self) -> LanguagePair:
        # reverse is applied last, after flags and stored config are merged
        return self.pair.reversed() if self.reverse else self.pair
