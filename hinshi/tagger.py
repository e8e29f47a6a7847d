"""
Tagger adapter for Hinshi.

The tagger itself (segmentation, lattice search, dictionary) is MeCab,
reached through fugashi. This module only turns its node list into
(surface, start, feature) triples.
"""

import logging
import shlex
import threading
from pathlib import Path
from typing import List, NamedTuple, Optional, Protocol, Sequence, Union

import fugashi

from hinshi.settings import MECAB_ARGS, default_dic_path

logger = logging.getLogger(__name__)


class RawMorpheme(NamedTuple):
    """One tagger output element, before classification."""
    surface: str
    start: int
    feature: str


class Tagger(Protocol):
    """Anything that segments text into raw morphemes."""

    def tag(self, text: str) -> Sequence[RawMorpheme]:
        ...


class MecabTagger:
    """
    fugashi/MeCab backed tagger.

    The dictionary is read-only once loaded. The MeCab handle itself is
    not re-entrant, so calls into it are serialised.
    """

    def __init__(self, tagger: "fugashi.GenericTagger", dic_path: Optional[Path] = None):
        self._tagger = tagger
        self._lock = threading.Lock()
        self.dic_path = dic_path

    def tag(self, text: str) -> List[RawMorpheme]:
        with self._lock:
            nodes = self._tagger(text)
            # Copy out of the nodes while still holding the handle
            raw = [(node.surface, node.white_space, node.feature_raw) for node in nodes]

        result = []
        cursor = 0
        for surface, white_space, feature in raw:
            start = cursor + len(white_space)
            result.append(RawMorpheme(surface, start, feature))
            cursor = start + len(surface)
        return result


def mecab_args(dic_path: Path) -> str:
    """MeCab command line for a dictionary directory."""
    args = ["-d", str(dic_path)]
    rc_path = dic_path / "mecabrc"
    if rc_path.exists():
        args += ["-r", str(rc_path)]
    command = " ".join(shlex.quote(arg) for arg in args)
    if MECAB_ARGS:
        command += " " + MECAB_ARGS
    return command


def load(dic_path: Optional[Union[str, Path]] = None) -> MecabTagger:
    """
    Load a MeCab dictionary.

    Args:
        dic_path: Dictionary directory. Defaults to HINSHI_DIC_PATH or
            the bundled unidic-lite dictionary.

    Returns:
        A ready MecabTagger.

    Raises:
        FileNotFoundError: The directory does not exist.
        OSError: MeCab could not load the dictionary.
    """
    path = Path(dic_path) if dic_path is not None else default_dic_path()
    if not path.is_dir():
        raise FileNotFoundError(f"Dictionary not found at: {path}")

    logger.info(f"Loading dictionary from {path}")
    try:
        tagger = fugashi.GenericTagger(mecab_args(path))
    except RuntimeError as e:
        raise OSError(f"Failed to load dictionary at {path}: {e}") from e
    return MecabTagger(tagger, path)
