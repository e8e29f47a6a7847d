"""
Settings and configuration for Hinshi.

Every value can be overridden through the environment.
"""

import os
from pathlib import Path
from typing import Optional

# Dictionary directory handed to MeCab. When unset, the bundled
# unidic-lite dictionary is used.
_dic_path = os.environ.get("HINSHI_DIC_PATH", "")
DIC_PATH: Optional[Path] = Path(_dic_path) if _dic_path else None

# Extra arguments appended to the MeCab command line
MECAB_ARGS = os.environ.get("HINSHI_MECAB_ARGS", "")

# Debug mode
DEBUG = os.environ.get("HINSHI_DEBUG", "").lower() in ("1", "true", "yes")


def default_dic_path() -> Path:
    """Dictionary directory to use when none is given explicitly."""
    if DIC_PATH is not None:
        return DIC_PATH

    import unidic_lite
    return Path(unidic_lite.DICDIR)
