"""
Shared fixtures for hinshi tests.

FakeTagger stands in for MeCab: it returns canned feature strings for
known texts so classification can be tested without a dictionary.
"""

import pytest

from hinshi.parser import Parser
from hinshi.tagger import RawMorpheme


# Full UniDic feature strings (17 fields)
HASHIRU = "動詞,一般,*,*,五段-ラ行,終止形-一般,ハシル,走る,走る,ハシル,走る,ハシル,和,*,*,*,*"
HASHITT = "動詞,一般,*,*,五段-ラ行,連用形-促音便,ハシル,走る,走っ,ハシッ,走る,ハシル,和,*,*,*,*"
TA = "助動詞,*,*,*,助動詞-タ,終止形-一般,タ,た,た,タ,た,タ,和,*,*,*,*"
GAKKOU = "名詞,普通名詞,一般,*,*,*,ガッコウ,学校,学校,ガッコー,学校,ガッコー,漢,*,*,*,*"
DE = "助詞,格助詞,*,*,*,*,デ,で,で,デ,で,デ,和,*,*,*,*"
UNKNOWN_CLASS = "謎品詞,*,*,*,*,*,ナゾ,謎,謎,ナゾ,謎,ナゾ,和,*,*,*,*"


class FakeTagger:
    """Tagger returning canned (surface, feature) pairs per text."""

    def __init__(self, outputs):
        self.outputs = outputs
        self.calls = []

    def tag(self, text):
        self.calls.append(text)
        result = []
        start = 0
        for surface, feature in self.outputs[text]:
            start = text.index(surface, start)
            result.append(RawMorpheme(surface, start, feature))
            start += len(surface)
        return result


@pytest.fixture
def fake_tagger():
    return FakeTagger({
        "走る": [("走る", HASHIRU)],
        "走った": [("走っ", HASHITT), ("た", TA)],
        "学校で走る": [("学校", GAKKOU), ("で", DE), ("走る", HASHIRU)],
        "学校謎走る": [("学校", GAKKOU), ("謎", UNKNOWN_CLASS), ("走る", HASHIRU)],
        "": [],
    })


@pytest.fixture
def parser(fake_tagger):
    return Parser(fake_tagger)
