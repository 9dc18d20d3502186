from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = '> '
_DEFAULT_CONTINUATION_PROMPT = '. '
_DEFAULT_LOG_LEVEL = 'WARNING'
_FALSEY = {'0', 'false', 'no', 'off'}


def setting_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def get_prompt() -> str:
    return setting_from_env('SUBLISP_PROMPT', _DEFAULT_PROMPT)


def get_continuation_prompt() -> str:
    return setting_from_env('SUBLISP_CONTINUATION_PROMPT', _DEFAULT_CONTINUATION_PROMPT)


def get_recursion_limit() -> Optional[int]:
    # unset or unparsable -> leave the interpreter default alone
    raw = os.environ.get('SUBLISP_RECURSION_LIMIT', '').strip()
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


def get_log_level() -> int:
    name = setting_from_env('SUBLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def use_color() -> bool:
    return setting_from_env('SUBLISP_COLOR', '1').strip().lower() not in _FALSEY
