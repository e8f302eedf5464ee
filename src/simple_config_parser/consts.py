# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/17 14:05:37
# @Author : Kariko Lin

from enum import Enum

# either of them starts a comment, wherever it is on a line.
COMMENT_CHARS = frozenset('#;')

TRUE_WORDS = frozenset({'true'})
FALSE_WORDS = frozenset({'false'})


class Marker(str, Enum):
    SECTION = '['
    DELIMITER = '='
    CARRIAGE_RETURN = '\r'
