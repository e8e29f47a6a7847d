"""
Classification errors for Hinshi.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Dimension(Enum):
    """Classification dimension a tag was read for."""
    WORD_CLASS = "word class"
    NOUN_TYPE = "noun type"
    PARTICLE_TYPE = "particle type"
    ADJECTIVE_TYPE = "adjective type"
    VERB_TYPE = "verb type"
    SYLLABLE_ROW = "syllable row"
    CONJUGATION_FORM = "conjugation form"
    # Reserved: no conjugation kind tag is rejected yet
    CONJUGATION_KIND = "conjugation kind"


class ClassificationError(Exception):
    """Base class for errors raised while decoding a feature tuple."""


class UnrecognizedTag(ClassificationError):
    """Raised when a tag is not in the closed table of its dimension."""

    def __init__(self, dimension: Dimension, tag: str):
        self.dimension = dimension
        self.tag = tag
        # Filled in by the parser once the morpheme position is known
        self.surface: Optional[str] = None
        self.start: Optional[int] = None
        super().__init__(f"unrecognized {dimension.value} tag '{tag}'")
        logger.debug(f"Unrecognized {dimension.value} tag: {tag!r}")

    def at(self, surface: str, start: int) -> "UnrecognizedTag":
        """Attach the position of the offending morpheme."""
        self.surface = surface
        self.start = start
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.start is not None:
            message += f" at {self.start} ('{self.surface}')"
        return message
