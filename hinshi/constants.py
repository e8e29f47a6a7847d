"""
Consolidated constants for Hinshi.

This module provides a single source of truth for:
- Positions of the fields in a feature tuple
- Delimiters used by the feature string and its composite fields
- The closed tables mapping tag spellings to grammatical categories

Spellings cover both the UniDic layout (五段-ラ行) and the older IPADIC
layout (五段・ラ行). Several spellings may map to the same category;
archaic (文語) spellings alias their modern counterpart.

---

WARNING: FIELD LAYOUT STABILITY REQUIREMENT
===========================================
The field positions below follow the UniDic feature layout
(pos1, pos2, pos3, pos4, cType, cForm, lForm, lemma, orth, pron,
orthBase, pronBase, goshu, ...). A dictionary that reorders or renames
these fields is not supported; classification will fail with
UnrecognizedTag rather than silently mislabel.

---
"""

from typing import Dict

from hinshi.grammar import (
    AdjectiveType, ConjugationForm, NounType, Origin, ParticleType,
    PartOfSpeech, SyllableRow, VerbGroup,
)


# ============================================================================
# Feature Tuple Layout
# ============================================================================

FEATURE_DELIMITER = ","

# Composite fields ("五段-ラ行") are split on the first delimiter present
TYPE_DELIMITER = "-"
TYPE_DELIMITER_FALLBACK = "・"

POS_WORD_CLASS = 0
POS_SUBCLASS = 1
POS_CONJ_TYPE = 4
POS_CONJ_FORM = 5
POS_BASIC = 6
POS_READING = 9
POS_LEXEME = 10
POS_ORIGIN = 12

# Placeholder MeCab writes into unused fields
EMPTY_TAG = "*"


# ============================================================================
# Tag Tables
# ============================================================================

WORD_CLASS_TAGS: Dict[str, PartOfSpeech] = {
    "助詞": PartOfSpeech.PARTICLE,
    "形容詞": PartOfSpeech.ADJECTIVE,
    "形状詞": PartOfSpeech.ADJECTIVE,
    "助動詞": PartOfSpeech.VERB,
    "動詞": PartOfSpeech.VERB,
    "代名詞": PartOfSpeech.PRONOUN,
    "感動詞": PartOfSpeech.INTERJECTION,
    "補助記号": PartOfSpeech.SYMBOL,
    "記号": PartOfSpeech.SYMBOL,
    "接続詞": PartOfSpeech.CONJUNCTION,
    "接尾辞": PartOfSpeech.SUFFIX,
    "接頭辞": PartOfSpeech.PREFIX,
    "副詞": PartOfSpeech.ADVERB,
    "空白": PartOfSpeech.SPACE,
    "名詞": PartOfSpeech.NOUN,
    "連体詞": PartOfSpeech.PRE_NOUN,
}

NOUN_TYPE_TAGS: Dict[str, NounType] = {
    "普通名詞": NounType.COMMON,
    "固有名詞": NounType.PROPER,
    "数詞": NounType.NUMERAL,
    "数": NounType.NUMERAL,
    "接尾": NounType.SUFFIX,
    "助動詞語幹": NounType.AUXILIARY_STEM,
}

PARTICLE_TYPE_TAGS: Dict[str, ParticleType] = {
    "係助詞": ParticleType.CONNECTING,
    "終助詞": ParticleType.SENTENCE_ENDING,
    "格助詞": ParticleType.CASE_MARKING,
    "接続助詞": ParticleType.CONJUNCTION,
    "副助詞": ParticleType.ADVERBIAL,
    "準体助詞": ParticleType.NOMINALIZING,
}

ADJECTIVE_TYPE_TAGS: Dict[str, AdjectiveType] = {
    "形容詞": AdjectiveType.I,
    "形状詞": AdjectiveType.NA,
}

AUXILIARY_VERB_TAG = "助動詞"
MAIN_VERB_TAG = "動詞"

VERB_GROUP_TAGS: Dict[str, VerbGroup] = {
    "五段": VerbGroup.GODAN,
    "文語四段": VerbGroup.GODAN,
    "文語上二段": VerbGroup.GODAN,
    "文語下二段": VerbGroup.GODAN,
    "下二段": VerbGroup.GODAN,
    "一段": VerbGroup.ICHIDAN,
    "上一段": VerbGroup.ICHIDAN,
    "下一段": VerbGroup.ICHIDAN,
    "サ行変格": VerbGroup.SURU,
    "文語サ行変格": VerbGroup.SURU,
    "カ行変格": VerbGroup.KURU,
    "ラ行変格": VerbGroup.IRREG_RU,
    "文語ラ行変格": VerbGroup.IRREG_RU,
    "ナ行変格": VerbGroup.IRREG_NU,
    "文語ナ行変格": VerbGroup.IRREG_NU,
    "文語カ行変格": VerbGroup.IRREG_WRITTEN,
    "文語上一段": VerbGroup.IRREG_WRITTEN,
    "文語下一段": VerbGroup.IRREG_WRITTEN,
}

SYLLABLE_ROW_TAGS: Dict[str, SyllableRow] = {
    "ガ行": SyllableRow.G,
    "カ行": SyllableRow.K,
    "マ行": SyllableRow.M,
    "ア行": SyllableRow.A,
    "ラ行": SyllableRow.R,
    "サ行": SyllableRow.S,
    "ザ行": SyllableRow.Z,
    "タ行": SyllableRow.T,
    "ダ行": SyllableRow.D,
    "ハ行": SyllableRow.H,
    "バ行": SyllableRow.B,
    "パ行": SyllableRow.P,
    "ナ行": SyllableRow.N,
    "ワア行": SyllableRow.WA,
    "ヤ行": SyllableRow.Y,
}

CONJUGATION_FORM_TAGS: Dict[str, ConjugationForm] = {
    EMPTY_TAG: ConjugationForm.NONE,
    "終止形": ConjugationForm.PLAIN,
    "命令形": ConjugationForm.IMPERATIVE,
    "未然形": ConjugationForm.NEGATIVE,
    "連体形": ConjugationForm.ATTRIBUTIVE,
    "連用形": ConjugationForm.CONTINUOUS,
    "仮定形": ConjugationForm.CONDITIONAL,
    "語幹": ConjugationForm.STEM,
    "已然形": ConjugationForm.REALIS,
    "ク語法": ConjugationForm.KUGOHOU,
    # Volitional/conjectural written form. Rare and undocumented in the
    # dictionary references; deliberately read as no form.
    "意志推量形": ConjugationForm.NONE,
}

ORIGIN_TAGS: Dict[str, Origin] = {
    "漢": Origin.CHINA,
    "和": Origin.JAPAN,
}
