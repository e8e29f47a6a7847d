"""
Pydantic models for Hinshi output.

These models flatten a Morpheme into plain JSON-friendly fields:
- Enum members become their string values
- The verb subtype is split into group, row and auxiliary detail

Usage:
    from hinshi.models import ParseResult

    morphemes = parser.parse("走った")
    print(ParseResult.from_morphemes("走った", morphemes).model_dump_json())
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from hinshi.grammar import Morpheme, VerbType


class MorphemeResult(BaseModel):
    """
    Pydantic model for a single decoded morpheme.
    """
    surface: str = Field(..., description="Text as it appears in input")
    start: int = Field(..., description="Start index in original text")
    end: int = Field(..., description="End index in original text")

    basic: str = Field("", description="Basic (dictionary) form")
    reading: str = Field("", description="Reading from the dictionary")
    lexeme: str = Field("", description="Normalized lexeme")

    # Word class
    pos: str = Field(..., description="Part of speech (e.g. 'verb', 'noun')")
    subtype: Optional[str] = Field(None, description="Subtype for particles, adjectives and nouns")
    verb_group: Optional[str] = Field(None, description="Conjugation group for verbs (e.g. 'godan')")
    syllable_row: Optional[str] = Field(None, description="Stem row for godan/ichidan verbs")
    auxiliary: Optional[str] = Field(None, description="Raw conjugation detail of auxiliary verbs")

    # Conjugation
    conjugation_form: str = Field("none", description="Conjugation form (e.g. 'plain')")
    conjugation_kind: str = Field("none", description="Conjugation kind")

    origin: Optional[str] = Field(None, description="Word origin: 'china' or 'japan'")

    @classmethod
    def from_morpheme(cls, m: Morpheme) -> "MorphemeResult":
        """Create MorphemeResult from a Morpheme."""
        subtype = m.word_class.subtype
        verb_group = syllable_row = auxiliary = None
        if isinstance(subtype, VerbType):
            verb_group = subtype.group.value
            syllable_row = subtype.row.value if subtype.row else None
            auxiliary = subtype.auxiliary
            subtype_value = None
        else:
            subtype_value = subtype.value if subtype is not None else None

        return cls(
            surface=m.surface,
            start=m.start,
            end=m.end,
            basic=m.basic,
            reading=m.reading,
            lexeme=m.lexeme,
            pos=m.word_class.pos.value,
            subtype=subtype_value,
            verb_group=verb_group,
            syllable_row=syllable_row,
            auxiliary=auxiliary,
            conjugation_form=m.conjugation.form.value,
            conjugation_kind=m.conjugation.kind.value,
            origin=m.origin.value if m.origin else None,
        )


class ParseResult(BaseModel):
    """
    Pydantic model for the morphemes of one text.

    Example response:
        {
            "text": "走る",
            "morphemes": [
                {"surface": "走る", "start": 0, "end": 2, "pos": "verb",
                 "verb_group": "godan", "syllable_row": "r",
                 "conjugation_form": "plain", ...}
            ],
            "count": 1
        }
    """
    text: str = Field(..., description="Input text")
    morphemes: List[MorphemeResult] = Field(..., description="Decoded morphemes in input order")
    count: int = Field(..., description="Number of morphemes")

    @classmethod
    def from_morphemes(cls, text: str, morphemes: List[Morpheme]) -> "ParseResult":
        results = [MorphemeResult.from_morpheme(m) for m in morphemes]
        return cls(text=text, morphemes=results, count=len(results))
