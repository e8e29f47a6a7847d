"""
Hinshi: Japanese part-of-speech decoder

Turns the feature strings of a MeCab-family tagger into typed
grammatical records (word class, conjugation, verb group and row,
word origin).
"""

import threading
from typing import List, Optional

from hinshi.classify import build_morpheme
from hinshi.errors import ClassificationError, Dimension, UnrecognizedTag
from hinshi.grammar import (
    AdjectiveType, Conjugation, ConjugationForm, ConjugationKind,
    Morpheme, NounType, Origin, ParticleType, PartOfSpeech, SyllableRow,
    VerbGroup, VerbType, WordClass,
)
from hinshi.parser import Parser
from hinshi.tagger import RawMorpheme, load

__version__ = "0.1.0"

_default_parser: Optional[Parser] = None
_default_lock = threading.Lock()


def get_parser() -> Parser:
    """Shared Parser on the default dictionary, loaded on first use."""
    global _default_parser
    with _default_lock:
        if _default_parser is None:
            _default_parser = Parser.load()
        return _default_parser


def parse(text: str, parser: Optional[Parser] = None) -> List[Morpheme]:
    """
    Decode Japanese text into morphemes.

    This is the main high-level API.

    Args:
        text: Japanese text to analyze.
        parser: Optional Parser. If None, the shared default is used.

    Returns:
        Morphemes in input order.

    Raises:
        UnrecognizedTag: A morpheme carried a tag outside the known tables.

    Example:
        >>> import hinshi
        >>> for m in hinshi.parse("走った"):
        ...     print(m.surface, m.word_class, m.conjugation.form.value)
    """
    if parser is None:
        parser = get_parser()
    return parser.parse(text)
