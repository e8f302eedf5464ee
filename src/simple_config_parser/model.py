# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/17 14:19:40
# @Author : Kariko Lin

from typing import Callable, NamedTuple

from .consts import FALSE_WORDS, TRUE_WORDS


class Entry(NamedTuple):
    """One `key = value` line, already normalized by the parser."""
    key: str
    value: str


def parse_bool(value: str) -> bool:
    """Only `true` and `false` (case-insensitive), nothing else.

    Unlike `bool()`, which takes every non-empty string as `True`.
    """
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f'not a boolean: {value!r}')


def converter_name(converter: Callable[[str], object]) -> str:
    return getattr(converter, '__name__', repr(converter))
