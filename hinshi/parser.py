"""
Parser facade for Hinshi.

Runs the tagger once per text and classifies its output in order.
Classification is fail-fast: the first unrecognized tag aborts the
whole call and no partial result is returned.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from hinshi.classify import build_morpheme
from hinshi.errors import UnrecognizedTag
from hinshi.grammar import Morpheme
from hinshi.tagger import Tagger, load

logger = logging.getLogger(__name__)


class Parser:
    """
    Decodes text into Morphemes.

    Holds no mutable state besides the tagger, so one Parser can be
    shared between threads.

    Example:
        >>> parser = Parser.load()
        >>> [str(m.word_class) for m in parser.parse("走る")]
        ['verb/godan-r']
    """

    def __init__(self, tagger: Tagger):
        self.tagger = tagger

    @classmethod
    def load(cls, dic_path: Optional[Union[str, Path]] = None) -> "Parser":
        """Create a Parser backed by the MeCab dictionary at `dic_path`."""
        return cls(load(dic_path))

    def iter_parse(self, text: str) -> Iterator[Morpheme]:
        """
        Lazily classify the morphemes of `text`.

        Nothing after a failing morpheme is classified.

        Raises:
            UnrecognizedTag: annotated with the failing morpheme's
                surface and start.
        """
        for raw in self.tagger.tag(text):
            try:
                yield build_morpheme(raw.surface, raw.start, raw.feature)
            except UnrecognizedTag as e:
                e.at(raw.surface, raw.start)
                logger.warning(f"Cannot classify '{raw.surface}' at {raw.start}: {e.dimension.value} tag '{e.tag}'")
                raise

    def parse(self, text: str) -> List[Morpheme]:
        """Classify every morpheme of `text`, in tagger order."""
        return list(self.iter_parse(text))
