"""Command-line entry point.

Usage:
    term-translate [-s LANG] [-t LANG] [-reverse] [-set] <text...>

Languages omitted on the command line are taken from ``config.json``;
``-set`` stores the given languages there as the new default.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from TermTranslator.core.config import CONFIG_FILE, ConfigStore
from TermTranslator.core.errors import ConfigWriteError, TranslationError
from TermTranslator.core.models import LanguagePair, TranslationRequest
from TermTranslator.services.translate.google_translate import GoogleTranslateClient

logger = logging.getLogger(__name__)

SEGMENT_MARKER = "- "
NO_TEXT_MESSAGE = "Please provide text to translate."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='term-translate', description='Translate text with Google translate.')
    parser.add_argument('-s', '--source', default='', help='Source language')
    parser.add_argument('-t', '--target', default='', help='Target language')
    parser.add_argument('-reverse', '--reverse', action='store_true', help='Reverse translation')
    parser.add_argument('-set', '--set', dest='set_default', action='store_true', help='Set default languages')
    parser.add_argument('--config', default=CONFIG_FILE, help='Path of the default language file (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    # flags are only read before the first word; everything after it is text
    parser.add_argument('text', nargs=argparse.REMAINDER, help='Text to translate')
    return parser


def resolve_request(args: argparse.Namespace, store: ConfigStore) -> TranslationRequest:
    """Merge flags with the stored pair, persisting first when ``-set`` was given."""
    base = LanguagePair()
    if not (args.source and args.target):
        base = store.load()
    pair = base.merged(args.source, args.target)

    if args.set_default:
        try:
            store.save(pair)
        except ConfigWriteError as e:
            # not fatal: the flags given on this run still apply
            print(e, file=sys.stderr)

    return TranslationRequest(
        text=' '.join(args.text),
        pair=pair,
        reverse=args.reverse,
    )


def run(argv: Optional[List[str]] = None, client: Optional[GoogleTranslateClient] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.text[:1] == ['--']:
        args.text = args.text[1:]

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.set_default and not (args.source or args.target):
        parser.error('-set requires -s and/or -t')

    request = resolve_request(args, ConfigStore(args.config))

    if not args.text:
        print(NO_TEXT_MESSAGE)
        return 0

    pair = request.effective_pair()
    logger.debug('Translating %r (%s)', request.text, pair)
    client = client or GoogleTranslateClient()
    try:
        segments = client.translate(request.text, pair.source, pair.target)
    except TranslationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for segment in segments:
        print(f"{SEGMENT_MARKER}{segment}")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
