import json
import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from TermTranslator.core.config import ConfigStore
from TermTranslator.core.errors import ConfigWriteError
from TermTranslator.core.models import LanguagePair


def test_load_without_file_returns_default(tmp_path):
    store = ConfigStore(tmp_path / "config.json")
    assert not store.exists()
    assert store.load() == LanguagePair("en", "en")


def test_save_then_load(tmp_path):
    store = ConfigStore(tmp_path / "config.json")
    store.save(LanguagePair("fr", "de"))
    assert store.load() == LanguagePair("fr", "de")


def test_saved_file_has_exactly_two_keys(tmp_path):
    path = tmp_path / "config.json"
    ConfigStore(path).save(LanguagePair("ja", "en"))
    with path.open('r', encoding='utf8') as fh:
        assert json.load(fh) == {"sourceLang": "ja", "targetLang": "en"}


def test_save_truncates_previous_record(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"sourceLang": "a-very-long-code", "targetLang": "another-long-one", "extra": 1}', encoding='utf8')
    store = ConfigStore(path)
    store.save(LanguagePair("es", "it"))
    assert json.loads(path.read_text(encoding='utf8')) == {"sourceLang": "es", "targetLang": "it"}


@pytest.mark.parametrize("content", [
    "not json at all",
    "",
    "[\"fr\", \"de\"]",
    "{\"sourceLang\": \"fr\"}",
    "{\"targetLang\": \"de\"}",
    "{\"sourceLang\": \"\", \"targetLang\": \"de\"}",
    "{\"sourceLang\": 1, \"targetLang\": \"de\"}",
    "[" * 100000,
])
def test_load_bad_file_returns_default(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding='utf8')
    assert ConfigStore(path).load() == LanguagePair("en", "en")


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"sourceLang": "pt", "targetLang": "en", "theme": "dark"}', encoding='utf8')
    assert ConfigStore(path).load() == LanguagePair("pt", "en")


def test_save_into_missing_directory_raises(tmp_path):
    store = ConfigStore(tmp_path / "missing" / "config.json")
    with pytest.raises(ConfigWriteError, match="Error saving config"):
        store.save(LanguagePair("fr", "de"))


def test_default_path_is_relative_config_json():
    assert ConfigStore().path == Path("config.json")


def test_language_pair_helpers():
    pair = LanguagePair("en", "fr")
    assert pair.reversed() == LanguagePair("fr", "en")
    assert pair.merged(target="de") == LanguagePair("en", "de")
    assert pair.merged(source="", target=None) == pair
