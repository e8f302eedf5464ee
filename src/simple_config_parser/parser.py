# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/17 14:26:03
# @Author : Kariko Lin

"""Note: the format here is a **section-less** INI dialect.

    ```ini
    ; line comment
    # also a line comment
    [ignored]           ; headers are skipped, keys are NOT scoped.
    key = value         ; inline comment stripped
      Key 2 =  spaced value
    ```

Keys get all spaces removed and are lower-cased,
values are only trimmed. There is no quoting nor escaping,
so `msg = "a;b"` gives `"a` (yes, with the quote).
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .abstract import FileHandler
from .consts import COMMENT_CHARS, Marker
from .errors import FileReadError, InvalidConfigError
from .model import Entry

logger = logging.getLogger(__name__)


def _strip_comment(line: str) -> str:
    # cut at whichever comment char comes first.
    for i, ch in enumerate(line):
        if ch in COMMENT_CHARS:
            return line[:i]
    return line


class ConfigParser:
    @staticmethod
    def readstream(buf: TextIOBase) -> list[Entry]:
        """读取解码好的字符串流。

        Any malformed line aborts the whole stream with
        `InvalidConfigError`; nothing parsed before it is returned.
        """
        ret: list[Entry] = []
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.strip()
            if not line or line[0] in COMMENT_CHARS:
                continue
            if line[0] == Marker.SECTION:
                continue

            parts = _strip_comment(line).split(Marker.DELIMITER)
            if len(parts) != 2:
                raise InvalidConfigError(lineno, line)
            key, val = parts
            ret.append(Entry(key.replace(' ', '').lower(), val.strip()))
        return ret

    @classmethod
    def parse(cls, text: str) -> list[Entry]:
        # '\r\n' and stray '\r' alike.
        return cls.readstream(
            StringIO(text.replace(Marker.CARRIAGE_RETURN, '')))


def parse(text: str) -> list[Entry]:
    """Parse config text into entries, in source order.

    Duplicated keys are kept as is; see `ConfigStore` for lookups.
    """
    return ConfigParser.parse(text)


class ConfigFileReader(FileHandler[str]):
    """Reads a config file into text, ready for `parse()`.

    If `encoding` is not given, UTF-8 is tried first,
    then whatever `chardet` guesses.
    """
    CONFIDENCE = 0.8

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def _read_bytes(self) -> bytes:
        try:
            with open(self._fn, 'rb') as fp:
                return fp.read()
        except OSError as e:
            raise FileReadError(self._fn, e.strerror or str(e)) from e

    def _guess_codec(self, raw: bytes) -> str:
        codec = chardet.detect(raw)
        logger.debug('chardet guessed %s for "%s"', codec, self._fn)
        if codec['encoding'] is None or codec['confidence'] < self.CONFIDENCE:
            return 'utf-8'
        return codec['encoding']

    def read(self) -> str:
        raw = self._read_bytes()
        try:
            # BOM shall not stick to the first key.
            text = raw.decode(self._codec or 'utf-8-sig')
        except (UnicodeDecodeError, LookupError) as e:
            if self._codec is not None:
                raise FileReadError(
                    self._fn, f'not a valid {self._codec} file') from e
            codec = self._guess_codec(raw)
            logger.warning(
                '"%s" is not UTF-8, falling back to %s.', self._fn, codec)
            try:
                text = raw.decode(codec)
            except (UnicodeDecodeError, LookupError) as e:
                raise FileReadError(self._fn, 'unknown text encoding') from e
        return text.replace(Marker.CARRIAGE_RETURN, '')

    def __str__(self) -> str:
        return "config file: " + super().__str__() + f"({self._codec})"
