"""
Grammatical model for Hinshi.

Enumerations for every classification dimension and the immutable
records built from them. A Morpheme is produced once per feature tuple
and never modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# ============================================================================
# Enumerations
# ============================================================================

class PartOfSpeech(Enum):
    """Top-level word class."""
    PARTICLE = "particle"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    NOUN = "noun"
    PRONOUN = "pronoun"
    INTERJECTION = "interjection"
    SYMBOL = "symbol"
    CONJUNCTION = "conjunction"
    SUFFIX = "suffix"
    PREFIX = "prefix"
    PRE_NOUN = "pre_noun"
    SPACE = "space"


class NounType(Enum):
    COMMON = "common"
    PROPER = "proper"
    NUMERAL = "numeral"
    SUFFIX = "suffix"
    AUXILIARY_STEM = "auxiliary_stem"  # stem of an auxiliary verb (そう, よう)


class ParticleType(Enum):
    CONNECTING = "connecting"  # 係助詞
    SENTENCE_ENDING = "sentence_ending"
    CASE_MARKING = "case_marking"
    CONJUNCTION = "conjunction"
    ADVERBIAL = "adverbial"
    NOMINALIZING = "nominalizing"


class AdjectiveType(Enum):
    I = "i"
    NA = "na"


class VerbGroup(Enum):
    """Conjugation group of a verb."""
    AUXILIARY = "auxiliary"
    GODAN = "godan"
    ICHIDAN = "ichidan"
    SURU = "suru"
    KURU = "kuru"
    IRREG_RU = "irreg_ru"
    IRREG_NU = "irreg_nu"
    IRREG_WRITTEN = "irreg_written"  # classical written-language groups


class SyllableRow(Enum):
    """Kana row of a verb's stem ending."""
    G = "g"
    K = "k"
    M = "m"
    A = "a"
    R = "r"
    S = "s"
    Z = "z"
    T = "t"
    D = "d"
    B = "b"
    H = "h"
    P = "p"
    N = "n"
    WA = "wa"
    Y = "y"


class ConjugationKind(Enum):
    # No dictionary tag has been seen to discriminate this yet
    NONE = "none"


class ConjugationForm(Enum):
    NONE = "none"
    PLAIN = "plain"
    IMPERATIVE = "imperative"
    NEGATIVE = "negative"
    ATTRIBUTIVE = "attributive"
    CONTINUOUS = "continuous"
    CONDITIONAL = "conditional"
    STEM = "stem"
    REALIS = "realis"
    KUGOHOU = "kugohou"


class Origin(Enum):
    """Word origin (goshu) of a reading."""
    CHINA = "china"
    JAPAN = "japan"


# ============================================================================
# Records
# ============================================================================

# Groups whose stem row is part of the verb type
ROW_GROUPS = frozenset({VerbGroup.GODAN, VerbGroup.ICHIDAN})


@dataclass(frozen=True)
class VerbType:
    """
    Verb subtype.

    Godan and Ichidan verbs carry the syllable row of their stem;
    auxiliaries keep the raw detail of their conjugation type
    (e.g. "タ" for 助動詞-タ).
    """
    group: VerbGroup
    row: Optional[SyllableRow] = None
    auxiliary: Optional[str] = None

    def __post_init__(self):
        if (self.group in ROW_GROUPS) != (self.row is not None):
            raise ValueError(f"{self.group.value} verb type with row {self.row}")
        if (self.group == VerbGroup.AUXILIARY) != (self.auxiliary is not None):
            raise ValueError(f"{self.group.value} verb type with auxiliary {self.auxiliary!r}")


Subtype = Union[ParticleType, VerbType, AdjectiveType, NounType]

# Word classes that always carry a subtype, and the subtype's class
SUBTYPE_CLASSES = {
    PartOfSpeech.PARTICLE: ParticleType,
    PartOfSpeech.VERB: VerbType,
    PartOfSpeech.ADJECTIVE: AdjectiveType,
    PartOfSpeech.NOUN: NounType,
}


@dataclass(frozen=True)
class WordClass:
    """A part of speech plus its subtype, if the part of speech has one."""
    pos: PartOfSpeech
    subtype: Optional[Subtype] = None

    def __post_init__(self):
        expected = SUBTYPE_CLASSES.get(self.pos)
        if expected is None:
            if self.subtype is not None:
                raise ValueError(f"{self.pos.value} takes no subtype, got {self.subtype!r}")
        elif not isinstance(self.subtype, expected):
            raise ValueError(f"{self.pos.value} requires a {expected.__name__}, got {self.subtype!r}")

    def __str__(self) -> str:
        if self.subtype is None:
            return self.pos.value
        if isinstance(self.subtype, VerbType):
            detail = self.subtype.group.value
            if self.subtype.row is not None:
                detail += f"-{self.subtype.row.value}"
            return f"{self.pos.value}/{detail}"
        return f"{self.pos.value}/{self.subtype.value}"

    @property
    def is_particle(self) -> bool:
        return self.pos == PartOfSpeech.PARTICLE

    @property
    def is_verb(self) -> bool:
        return self.pos == PartOfSpeech.VERB

    @property
    def is_adjective(self) -> bool:
        return self.pos == PartOfSpeech.ADJECTIVE

    @property
    def is_adverb(self) -> bool:
        return self.pos == PartOfSpeech.ADVERB

    @property
    def is_noun(self) -> bool:
        return self.pos == PartOfSpeech.NOUN

    @property
    def is_pronoun(self) -> bool:
        return self.pos == PartOfSpeech.PRONOUN

    @property
    def is_interjection(self) -> bool:
        return self.pos == PartOfSpeech.INTERJECTION

    @property
    def is_symbol(self) -> bool:
        return self.pos == PartOfSpeech.SYMBOL

    @property
    def is_conjunction(self) -> bool:
        return self.pos == PartOfSpeech.CONJUNCTION

    @property
    def is_suffix(self) -> bool:
        return self.pos == PartOfSpeech.SUFFIX

    @property
    def is_prefix(self) -> bool:
        return self.pos == PartOfSpeech.PREFIX

    @property
    def is_pre_noun(self) -> bool:
        return self.pos == PartOfSpeech.PRE_NOUN

    @property
    def is_space(self) -> bool:
        return self.pos == PartOfSpeech.SPACE


@dataclass(frozen=True)
class Conjugation:
    kind: ConjugationKind
    form: ConjugationForm


@dataclass(frozen=True)
class Morpheme:
    """
    One decoded morpheme.

    `surface` and `start` come from the input text; `basic`, `reading`
    and `lexeme` come from the dictionary and are empty when the
    feature tuple is too short to hold them.
    """
    surface: str
    start: int
    basic: str
    reading: str
    lexeme: str
    word_class: WordClass
    conjugation: Conjugation
    origin: Optional[Origin] = None

    @property
    def end(self) -> int:
        """Offset just past the surface in the input text."""
        return self.start + len(self.surface)
