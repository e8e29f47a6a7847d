"""
Feature tuple classification for Hinshi.

Each classify_* function reads fixed positions of a feature tuple and
maps the tag found there through a closed table in hinshi.constants.
A tag missing from its table raises UnrecognizedTag; there is no
fallback category. Origin is the only optional dimension.

build_morpheme() combines the leaf classifiers into a Morpheme.
"""

from typing import Optional, Sequence, Union

from hinshi.constants import (
    ADJECTIVE_TYPE_TAGS, AUXILIARY_VERB_TAG, CONJUGATION_FORM_TAGS,
    MAIN_VERB_TAG, NOUN_TYPE_TAGS, ORIGIN_TAGS, PARTICLE_TYPE_TAGS,
    POS_BASIC, POS_CONJ_FORM, POS_CONJ_TYPE, POS_LEXEME, POS_ORIGIN,
    POS_READING, POS_SUBCLASS, POS_WORD_CLASS, SYLLABLE_ROW_TAGS,
    VERB_GROUP_TAGS, WORD_CLASS_TAGS,
)
from hinshi.errors import Dimension, UnrecognizedTag
from hinshi.features import field_or_empty, split_features, split_type
from hinshi.grammar import (
    AdjectiveType, Conjugation, ConjugationForm, ConjugationKind,
    Morpheme, NounType, Origin, ParticleType, PartOfSpeech, ROW_GROUPS,
    SyllableRow, VerbGroup, VerbType, WordClass,
)


# ============================================================================
# Word Class
# ============================================================================

def classify_word_class(fields: Sequence[str]) -> WordClass:
    """
    Classify the word class from field 0, resolving the subtype the
    class requires from the fields it depends on.
    """
    tag = field_or_empty(fields, POS_WORD_CLASS)
    pos = WORD_CLASS_TAGS.get(tag)
    if pos is None:
        raise UnrecognizedTag(Dimension.WORD_CLASS, tag)

    if pos == PartOfSpeech.PARTICLE:
        return WordClass(pos, classify_particle_type(fields))
    if pos == PartOfSpeech.VERB:
        return WordClass(pos, classify_verb_type(fields))
    if pos == PartOfSpeech.ADJECTIVE:
        return WordClass(pos, classify_adjective_type(fields))
    if pos == PartOfSpeech.NOUN:
        return WordClass(pos, classify_noun_type(fields))
    return WordClass(pos)


def classify_noun_type(fields: Sequence[str]) -> NounType:
    tag = field_or_empty(fields, POS_SUBCLASS)
    noun_type = NOUN_TYPE_TAGS.get(tag)
    if noun_type is None:
        raise UnrecognizedTag(Dimension.NOUN_TYPE, tag)
    return noun_type


def classify_particle_type(fields: Sequence[str]) -> ParticleType:
    tag = field_or_empty(fields, POS_SUBCLASS)
    particle_type = PARTICLE_TYPE_TAGS.get(tag)
    if particle_type is None:
        raise UnrecognizedTag(Dimension.PARTICLE_TYPE, tag)
    return particle_type


def classify_adjective_type(fields: Sequence[str]) -> AdjectiveType:
    # The adjective type is encoded in the word class spelling itself
    tag = field_or_empty(fields, POS_WORD_CLASS)
    adjective_type = ADJECTIVE_TYPE_TAGS.get(tag)
    if adjective_type is None:
        raise UnrecognizedTag(Dimension.ADJECTIVE_TYPE, tag)
    return adjective_type


# ============================================================================
# Verbs
# ============================================================================

def classify_verb_type(fields: Sequence[str]) -> VerbType:
    """
    Classify a verb from field 0 (auxiliary or main verb) and the
    conjugation type composite in field 4.

    Auxiliaries keep the detail half of field 4 verbatim. Main verbs
    are resolved through the group table; Godan and Ichidan verbs also
    resolve their syllable row, which must be known.
    """
    tag = field_or_empty(fields, POS_WORD_CLASS)
    conj_type = field_or_empty(fields, POS_CONJ_TYPE)

    if tag == AUXILIARY_VERB_TAG:
        return VerbType(VerbGroup.AUXILIARY, auxiliary=split_type(conj_type)[1])
    if tag != MAIN_VERB_TAG:
        raise UnrecognizedTag(Dimension.VERB_TYPE, tag)

    group_tag, detail = split_type(conj_type)
    group = VERB_GROUP_TAGS.get(group_tag)
    if group is None:
        raise UnrecognizedTag(Dimension.VERB_TYPE, group_tag)
    if group in ROW_GROUPS:
        return VerbType(group, row=classify_syllable_row(detail))
    return VerbType(group)


def classify_syllable_row(tag: str) -> SyllableRow:
    row = SYLLABLE_ROW_TAGS.get(tag)
    if row is None:
        raise UnrecognizedTag(Dimension.SYLLABLE_ROW, tag)
    return row


# ============================================================================
# Conjugation
# ============================================================================

def classify_conjugation_form(fields: Sequence[str]) -> ConjugationForm:
    tag = split_type(field_or_empty(fields, POS_CONJ_FORM))[0]
    form = CONJUGATION_FORM_TAGS.get(tag)
    if form is None:
        raise UnrecognizedTag(Dimension.CONJUGATION_FORM, tag)
    return form


def classify_conjugation_kind(fields: Sequence[str]) -> ConjugationKind:
    # Field 4 carries no kind distinction yet; every value is accepted.
    return ConjugationKind.NONE


# ============================================================================
# Origin
# ============================================================================

def classify_origin(fields: Sequence[str]) -> Optional[Origin]:
    """Word origin from field 12; None when absent or not 漢/和."""
    if len(fields) > POS_ORIGIN:
        return ORIGIN_TAGS.get(fields[POS_ORIGIN])
    return None


# ============================================================================
# Morpheme Builder
# ============================================================================

def build_morpheme(
    surface: str,
    start: int,
    fields: Union[str, Sequence[str]],
) -> Morpheme:
    """
    Build a Morpheme from its position in the input and its features.

    Args:
        surface: Text of the morpheme as it appears in the input.
        start: Offset of `surface` in the input.
        fields: Feature tuple, or the raw comma separated feature string.

    Returns:
        The decoded Morpheme.

    Raises:
        UnrecognizedTag: The first mandatory dimension that failed.
    """
    if isinstance(fields, str):
        fields = split_features(fields)

    word_class = classify_word_class(fields)
    conjugation = Conjugation(
        kind=classify_conjugation_kind(fields),
        form=classify_conjugation_form(fields),
    )

    return Morpheme(
        surface=surface,
        start=start,
        basic=field_or_empty(fields, POS_BASIC),
        reading=field_or_empty(fields, POS_READING),
        lexeme=field_or_empty(fields, POS_LEXEME),
        word_class=word_class,
        conjugation=conjugation,
        origin=classify_origin(fields),
    )
