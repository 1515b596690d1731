"""Persisted default language pair.

The record is a flat JSON object ``{"sourceLang": ..., "targetLang": ...}``
stored in ``config.json`` under the working directory. Loading never fails:
a missing, unreadable or incomplete file yields the default ``en -> en`` pair
so startup is never blocked by a bad config.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import json
import logging

from TermTranslator.core.errors import ConfigReadError, ConfigWriteError
from TermTranslator.core.models import LanguagePair

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
SOURCE_KEY = "sourceLang"
TARGET_KEY = "targetLang"


@dataclass
class ConfigStore:
    path: Path = field(default_factory=lambda: Path(CONFIG_FILE))

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def exists(self) -> bool:
        return self.path.is_file()

    def _read_record(self) -> dict:
        try:
            with self.path.open('r', encoding='utf8') as fh:
                data = json.load(fh)
        except (OSError, ValueError, RecursionError) as e:
            raise ConfigReadError(f"Error reading config {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigReadError(f"Error reading config {self.path}: expected a JSON object")
        return data

    def load(self) -> LanguagePair:
        """Return the stored pair, or the default pair if none is usable."""
        if not self.exists():
            logger.debug('No config at %s, using default pair', self.path)
            return LanguagePair()
        try:
            record = self._read_record()
        except ConfigReadError as e:
            logger.warning('%s', e)
            return LanguagePair()

        source = record.get(SOURCE_KEY)
        target = record.get(TARGET_KEY)
        # a partial record is treated as no record at all
        if not (isinstance(source, str) and source and isinstance(target, str) and target):
            logger.warning('Config %s is missing %s or %s, using default pair', self.path, SOURCE_KEY, TARGET_KEY)
            return LanguagePair()
        return LanguagePair(source=source, target=target)

    def save(self, pair: LanguagePair) -> None:
        """Create or truncate the config file with ``pair``."""
        record = {SOURCE_KEY: pair.source, TARGET_KEY: pair.target}
        try:
            with self.path.open('w', encoding='utf8') as fh:
                json.dump(record, fh, ensure_ascii=False)
                fh.write('\n')
        except OSError as e:
            raise ConfigWriteError(f"Error saving config: {e}") from e
        logger.info('Saved default languages %s to %s', pair, self.path)
