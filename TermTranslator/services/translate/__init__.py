"""Translation service package.

Exposes the Google translate client used by the CLI.
"""
from .google_translate import GoogleTranslateClient, build_url, extract_segments

__all__ = ["GoogleTranslateClient", "build_url", "extract_segments"]
