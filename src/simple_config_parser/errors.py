# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/17 14:11:48
# @Author : Kariko Lin

"""Errors raised when loading or querying a config.

Every one of them derives from `ConfigError`, so callers may catch
the whole family at once. A failed load never commits anything,
see `ConfigStore.load_text()`.
"""


class ConfigError(Exception):
    """Base of all errors of this package."""
    pass


class FileReadError(ConfigError):
    """The config file is missing, unreadable, or cannot be decoded.

    The underlying `OSError` (or `UnicodeDecodeError`) is kept
    as `__cause__`.
    """
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'cannot read config file "{path}": {reason}')
        self.path = path
        self.reason = reason


class NoFileDefinedError(ConfigError):
    """`ConfigStore.read()` got called, but no file was bound to the store.

    Try `ConfigStore(file=...)`, or just `load_text()` instead.
    """
    def __init__(self) -> None:
        super().__init__('no config file bound to this store.')


class InvalidConfigError(ConfigError, ValueError):
    """A data line does not hold exactly one `=` after comment stripping."""
    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'line {lineno}: expected `key = value`, got {line!r}')
        self.lineno = lineno
        self.line = line


class NoSuchKeyError(ConfigError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    # KeyError would repr() the args instead.
    def __str__(self) -> str:
        return f'no such key: "{self.key}"'


class ValueParseError(ConfigError, ValueError):
    def __init__(self, key: str, value: str, typename: str) -> None:
        super().__init__(
            f'value of "{key}" is not a valid {typename}: {value!r}')
        self.key = key
        self.value = value
        self.typename = typename
