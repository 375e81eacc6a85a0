from __future__ import annotations
import os
from pathlib import Path
from typing import List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


DEFAULT_PROMPT = 'lis> '
DEFAULT_RECURSION_LIMIT = 10000
DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Source files evaluated before the first user input."""
    return paths_from_env('LIS_PRELUDE_PATH')


def get_prompt() -> str:
    return os.environ.get('LIS_PROMPT', DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    raw = os.environ.get('LIS_RECURSION_LIMIT')
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"LIS_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.environ.get('LIS_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
