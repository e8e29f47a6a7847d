"""
Feature string splitting for Hinshi.

A tagger emits one comma separated feature string per morpheme. Two of
its fields are composites ("五段-ラ行") holding a group and a detail.
None of these functions raise; missing data reads as "".
"""

from typing import Sequence, Tuple

from hinshi.constants import (
    FEATURE_DELIMITER, TYPE_DELIMITER, TYPE_DELIMITER_FALLBACK,
)

FeatureTuple = Tuple[str, ...]


def split_features(feature: str) -> FeatureTuple:
    """Split a raw feature string into its fields."""
    return tuple(feature.split(FEATURE_DELIMITER))


def split_type(value: str) -> Tuple[str, str]:
    """
    Split a composite field into (group, detail).

    UniDic joins the halves with "-", IPADIC with "・"; the hyphen is
    tried first. A value with neither delimiter is all group.

    Examples:
        >>> split_type("五段-ラ行")
        ('五段', 'ラ行')
        >>> split_type("五段・ラ行")
        ('五段', 'ラ行')
        >>> split_type("終止形")
        ('終止形', '')
    """
    if TYPE_DELIMITER in value:
        parts = value.split(TYPE_DELIMITER)
    else:
        parts = value.split(TYPE_DELIMITER_FALLBACK)
    return parts[0], parts[1] if len(parts) > 1 else ""


def field_or_empty(fields: Sequence[str], pos: int) -> str:
    """Field at `pos`, or "" when the tuple is too short."""
    if len(fields) > pos:
        return fields[pos]
    return ""
