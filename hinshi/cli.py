"""
Command line interface for hinshi.

Usage:
    python -m hinshi "日本語テキスト"
    python -m hinshi -j "日本語テキスト"         # JSON output
    python -m hinshi -d /path/to/dic "テキスト"  # custom dictionary
"""

import argparse
import logging
import sys
from typing import List, Optional

from hinshi import __version__
from hinshi.errors import ClassificationError
from hinshi.grammar import Morpheme
from hinshi.models import ParseResult
from hinshi.parser import Parser
from hinshi.settings import DEBUG


def format_morpheme_text(m: Morpheme) -> str:
    """Format one morpheme as a tab separated line."""
    origin = m.origin.value if m.origin else "-"
    return "\t".join([
        m.surface,
        str(m.start),
        str(m.word_class),
        m.conjugation.form.value,
        m.basic or "-",
        m.reading or "-",
        origin,
    ])


def format_morphemes_text(morphemes: List[Morpheme]) -> str:
    return "\n".join(format_morpheme_text(m) for m in morphemes)


def setup_logging(verbose: bool = False):
    if DEBUG:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for Hinshi (Japanese part-of-speech decoder)',
        prog='hinshi',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Japanese text to analyze',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print morphemes as JSON',
    )

    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='MeCab dictionary directory (default: HINSHI_DIC_PATH or unidic-lite)',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress information',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'hinshi {__version__}')
        return 0

    text = ' '.join(parsed.text) if parsed.text else ''

    if not text:
        parser.print_help()
        return 1

    setup_logging(parsed.verbose)

    try:
        hinshi_parser = Parser.load(parsed.dictionary)
    except OSError as e:
        print(f'Error loading dictionary: {e}', file=sys.stderr)
        return 1

    try:
        morphemes = hinshi_parser.parse(text)
    except ClassificationError as e:
        print(f'Error processing text: {e}', file=sys.stderr)
        return 1

    if parsed.json:
        print(ParseResult.from_morphemes(text, morphemes).model_dump_json())
    else:
        print(format_morphemes_text(morphemes))

    return 0


if __name__ == '__main__':
    sys.exit(main())
