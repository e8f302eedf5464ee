# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/17 14:48:22
# @Author : Kariko Lin

"""Key/value store on top of `parser`.

Lookups are case-insensitive and the *last* loaded entry wins,
so this just works:

    ```python
    cfg = ConfigStore().load_file('defaults.cfg').load_file('local.cfg')
    cfg.get_int('port')
    ```
"""

from collections.abc import Mapping
from os import PathLike
from typing import Any, Callable, Iterator, Self, Sequence, TypeVar, overload

from .errors import NoFileDefinedError, NoSuchKeyError, ValueParseError
from .model import Entry, converter_name, parse_bool
from .parser import ConfigFileReader, parse

T = TypeVar('T')

# `None` is a fair default value, so have to use another sentinel.
_MISSING: Any = object()


class ConfigStore(Mapping[str, str]):
    """An ordered, append-only sequence of `Entry`.

    Multiple loads append rather than replace. As a `Mapping`,
    `len()` and iteration cover *distinct* keys
    (in the order they first appeared);
    use `self.entries` for the raw sequence.

    The store does no locking. Share it across threads only
    once the last load is done.
    """
    def __init__(
        self,
        file: str | PathLike[str] | None = None,
        encoding: str | None = None
    ) -> None:
        self.__data: list[Entry] = []
        self._file = file
        self._codec = encoding

    @property
    def file(self) -> str | PathLike[str] | None:
        """The file `self.read()` would load, if any."""
        return self._file

    @property
    def entries(self) -> Sequence[Entry]:
        return tuple(self.__data)

    def load_text(self, text: str) -> Self:
        """Parse `text` and append its entries.

        All or nothing: on `InvalidConfigError` the store is left
        as it was before the call.
        """
        # parse() raises before anything is appended.
        self.__data.extend(parse(text))
        return self

    def load_file(
        self, path: str | PathLike[str], encoding: str | None = None
    ) -> Self:
        """Same as `load_text()`, but with a file's content.

        May raise `FileReadError`, besides what `load_text()` raises.
        """
        reader = ConfigFileReader(path, encoding or self._codec)
        return self.load_text(reader.read())

    def read(self) -> Self:
        """Load the file given to the constructor."""
        if self._file is None:
            raise NoFileDefinedError()
        return self.load_file(self._file)

    def _find(self, key: str) -> Entry | None:
        key = key.lower()
        for i in reversed(self.__data):
            if i.key == key:
                return i
        return None

    def get_string(self, key: str) -> str:
        if (entry := self._find(key)) is None:
            raise NoSuchKeyError(key.lower())
        return entry.value

    @overload
    def get(self, key: str) -> str: ...

    @overload
    def get(self, key: str, converter: Callable[[str], T]) -> T: ...

    @overload
    def get(
        self, key: str, converter: Callable[[str], T], default: T
    ) -> T: ...

    def get(self, key, converter=str, default=_MISSING):
        """Look `key` up and convert the raw text with `converter`.

        Unlike `dict.get()`, the second positional argument is the
        *converter*, not a fallback; pass `default` for that:
        `cfg.get('port', int, 8080)`.

        `bool` is special-cased to `parse_bool()`, since `bool('false')`
        is `True`. `int`, `float` or any callable taking a `str` works.
        Only a `ValueError` from it counts as a bad value.

        Raises:
            NoSuchKeyError: key not found and no `default` given.
            ValueParseError: `converter` rejects the value.
        """
        if (entry := self._find(key)) is None:
            if default is _MISSING:
                raise NoSuchKeyError(key.lower())
            return default
        fn = parse_bool if converter is bool else converter
        try:
            return fn(entry.value)
        except ValueError as e:
            raise ValueParseError(
                entry.key, entry.value, converter_name(converter)) from e

    def get_bool(self, key: str) -> bool:
        return self.get(key, bool)

    def get_int(self, key: str) -> int:
        return self.get(key, int)

    def get_float(self, key: str) -> float:
        return self.get(key, float)

    def get_list(self, key: str, sep: str = ',') -> list[str]:
        """`a, b,, c` => `['a', 'b', 'c']`."""
        return [i.strip() for i in self.get_string(key).split(sep) if i.strip()]

    def __getitem__(self, key: str) -> str:
        return self.get_string(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __iter__(self) -> Iterator[str]:
        # dict keeps the first-seen order.
        return iter(dict.fromkeys(i.key for i in self.__data))

    def __len__(self) -> int:
        return len({i.key for i in self.__data})

    def __repr__(self) -> str:
        return '<ConfigStore> { .cnt = %d, .file = %r }' % (
            len(self.__data), self._file)
