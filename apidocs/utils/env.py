"""Load ``.env`` defaults before configuration is read."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

__all__ = ["load_env"]


_env_loaded = False


def load_env(*, dotenv_path: Optional[str | Path] = None, force: bool = False) -> bool:
    """Read ``.env`` defaults into the environment; return whether a file was read.

    The file is ``dotenv_path`` if given, else ``APIDOCS_DOTENV_PATH``, else the
    nearest ``.env`` above the working directory. Variables already set in the
    process win. Only the first call does anything unless ``force`` is set.
    """

    global _env_loaded
    if _env_loaded and not force:
        return False
    _env_loaded = True

    path = dotenv_path or os.getenv("APIDOCS_DOTENV_PATH") or find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(dotenv_path=path, override=False)
