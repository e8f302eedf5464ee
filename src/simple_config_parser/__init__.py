# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 14:55:09
# @Author : Kariko Lin

from .errors import (
    ConfigError,
    FileReadError,
    NoFileDefinedError,
    InvalidConfigError,
    NoSuchKeyError,
    ValueParseError
)
from .model import Entry, parse_bool
from .parser import ConfigParser, ConfigFileReader, parse
from .store import ConfigStore

__all__ = [
    'ConfigStore', 'Entry', 'parse', 'parse_bool',
    'ConfigParser', 'ConfigFileReader',
    'ConfigError', 'FileReadError', 'NoFileDefinedError',
    'InvalidConfigError', 'NoSuchKeyError', 'ValueParseError'
]
