"""Google translate client.

Talks to the keyless ``translate_a/single`` endpoint used by the ``gtx``
web client. The response is an unversioned nested array, e.g.::

    [[["hola", "hello", null, null], ...], null, "en"]

Only element 0 of each sentence entry is used.
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional
from urllib.parse import quote_plus

import requests

from TermTranslator.core.errors import (
    MalformedResponseError,
    NetworkError,
    NoTranslationFoundError,
    TranslationError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://translate.googleapis.com/translate_a/single?client=gtx&dt=t&sl={source}&tl={target}&q="


def build_url(text: str, source: str, target: str) -> str:
    """Return the request URL with every value form-encoded (space -> '+')."""
    return BASE_URL.format(source=quote_plus(source), target=quote_plus(target)) + quote_plus(text)


def extract_segments(payload: Any) -> List[str]:
    """Pull the translated text of each sentence out of a decoded response.

    Raises MalformedResponseError if ``payload`` is not a list and
    NoTranslationFoundError if no sentence entry has the expected shape.
    Entries that do not match are skipped.
    """
    if not isinstance(payload, list):
        raise MalformedResponseError(f"malformed response: expected a JSON array, got {type(payload).__name__}")

    segments: List[str] = []
    sentences = payload[0] if payload else None
    if isinstance(sentences, list):
        skipped = 0
        for sentence in sentences:
            if isinstance(sentence, list) and sentence and isinstance(sentence[0], str):
                segments.append(sentence[0])
            else:
                skipped += 1
        if skipped:
            logger.debug('Skipped %d sentence entries without translated text', skipped)

    if not segments:
        raise NoTranslationFoundError()
    return segments


class GoogleTranslateClient:
    def __init__(self, timeout: Optional[float] = None):
        # None keeps the requests default (no timeout)
        self.timeout = timeout

    def translate(self, text: str, source: str, target: str) -> List[str]:
        """Translate ``text`` and return one string per translated segment."""
        if not (source and target):
            raise TranslationError("source and target languages must both be set")
        url = build_url(text, source, target)
        logger.debug('GET %s', url)
        try:
            resp = requests.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            raise NetworkError(f"HTTP request error: {e}") from e

        with resp:
            logger.debug('Response status %s', resp.status_code)
            if resp.status_code != 200:
                raise UnexpectedStatusError(resp.status_code)
            try:
                body = resp.content
            except (requests.RequestException, OSError) as e:
                raise NetworkError(f"reading response body error: {e}") from e

        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise MalformedResponseError(f"malformed response: {e}") from e

        return extract_segments(payload)
