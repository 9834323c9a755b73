# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 01:04:45
# @Author : Kariko Lin

"""File side of the codec: decoding, stat and (re)writing one ini file.

This module never locks anything, `Settings` does.
"""

import logging
import os
from io import StringIO
from os.path import dirname, exists
from typing import NamedTuple

import chardet

from ..abstract import FileHandler
from ..consts import DEFAULT_ENCODING
from .codec import readstream, serialize
from .model import ConfigTable


class FileStamp(NamedTuple):
    """What we remember about the file the last time we touched it."""
    mtime_ns: int
    size: int


class IniFileHandler(FileHandler[ConfigTable]):
    def __init__(self, filename: str, encoding: str = DEFAULT_ENCODING):
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str:
        return self._codec

    def exists(self) -> bool:
        return exists(self._fn)

    def stamp(self) -> FileStamp:
        """May raise `OSError`, e.g. the file got removed meanwhile."""
        st = os.stat(self._fn)
        return FileStamp(st.st_mtime_ns, st.st_size)

    @staticmethod
    def _decode(raw: bytes, encoding: str) -> str:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            pass

        codec = chardet.detect(raw)
        if codec is None or not codec['encoding'] or codec['confidence'] < 0.8:
            codec = {'encoding': DEFAULT_ENCODING}
        logging.info(f'Falling back to {codec["encoding"]} decoding.')
        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            return raw.decode(DEFAULT_ENCODING, errors='replace')

    def read_text(self) -> str:
        """Read and decode the whole file.

        CAUTION:
            May raise `OSError`.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        # a leading BOM would hide the first section header.
        return self._decode(raw, self._codec).removeprefix('\ufeff')

    def read(self, ins: ConfigTable | None = None) -> ConfigTable:
        """Parse the file into `ins` (or a new table).

        CAUTION:
            May raise `OSError`.
        """
        return readstream(StringIO(self.read_text()), ins)

    def create(self) -> None:
        """Create an empty file, and any missing parent folder.

        CAUTION:
            May raise `OSError`.
        """
        logging.info(f"{self._fn} doesn't exist, create a new one.")
        parent = dirname(self._fn)
        if parent and not exists(parent):
            logging.info(f'Create directory: {parent}')
            os.makedirs(parent, exist_ok=True)
        with open(self._fn, 'w', encoding=self._codec):
            pass
        logging.info(f'Create regular file: {self._fn}')

    def write(self, instance: ConfigTable) -> None:
        """Rewrite the whole file from `instance`.

        CAUTION:
            May raise `OSError`.
        """
        text = serialize(instance)
        with open(self._fn, 'w', encoding=self._codec, newline='\n') as fp:
            fp.write(text)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
