# -*- encoding: utf-8 -*-
# @File   : settings.py
# @Time   : 2026/10/13 22:18:40
# @Author : Kariko Lin

"""Typed, thread-safe access to one ini file.

The in-memory table is a cache of the file. Every call compares the file
stamp (mtime + size) with the one recorded at the last load / write,
and reloads the whole table first if they differ. Every `set()` rewrites
the whole file.

One `Settings` per file, please. Two instances on the same path would hold
two locks and two tables, and happily overwrite each other's writes.
Use `SettingsRegistry` (or the module level helpers in `registry`)
to get the shared instance.
"""

import logging
import sys
import threading
from os.path import abspath, expanduser
from typing import TextIO

from .consts import DEFAULT_ENCODING, ValueType
from .convert import SupportedValue, convert_value, format_value, kind_of
from .errors import SettingsLoadError, SettingsStoreError
from .ini.model import ConfigTable
from .ini.parser import FileStamp, IniFileHandler


def canonical_path(path: str) -> str:
    return abspath(expanduser(str(path)))


class Settings:
    def __init__(self, path: str, encoding: str = DEFAULT_ENCODING) -> None:
        self._path = canonical_path(path)
        self._handler = IniFileHandler(self._path, encoding)
        self._lock = threading.Lock()
        self._table = ConfigTable()
        # None until the first successful load or write.
        self._stamp: FileStamp | None = None

    @property
    def full_path(self) -> str:
        return self._path

    def get_full_path(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Settings):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f'Settings({self._path!r})'

    def __str__(self) -> str:
        with self._lock:
            return str(self._table)

    # ---- lock held below ----

    def _reload(self) -> None:
        try:
            stamp = self._handler.stamp()
            self._table.clear()
            self._handler.read(self._table)
        except OSError as e:
            raise SettingsLoadError(
                f'{self._path} open failed, maybe permission denied.') from e
        self._stamp = stamp

    def _is_stale(self) -> bool:
        try:
            return self._stamp != self._handler.stamp()
        except OSError as e:
            raise SettingsLoadError(f'Unable to stat {self._path}.') from e

    def _ensure_file(self) -> None:
        try:
            self._handler.create()
            self._stamp = self._handler.stamp()
        except OSError as e:
            # maybe permission denied
            raise SettingsStoreError(
                f'{self._path} create failed, maybe permission denied.'
            ) from e
        # whatever we cached belonged to a file that is gone now.
        self._table.clear()

    def _store(self) -> None:
        try:
            self._handler.write(self._table)
            self._stamp = self._handler.stamp()
        except OSError as e:
            raise SettingsStoreError(
                f'{self._path} write failed, maybe permission denied.') from e

    # ---- interfaces ----

    def get(
        self, key: str, default: SupportedValue | None = None,
        kind: ValueType | None = None
    ):
        """Read `key` (`section.key`) as `kind`.

        `kind` defaults to the type of `default` (str if `default` is None).
        Missing file, missing key or empty value all give `default`.

        Raises:
            SettingsLoadError: the file changed but could not be reloaded.
        """
        kind = kind_of(default) if kind is None else ValueType(kind)
        with self._lock:
            if not self._handler.exists():
                return default
            if self._is_stale():
                self._reload()
            if key not in self._table:
                return default
            return convert_value(self._table[key], default, kind)

    def get_formatted(
        self, default: SupportedValue | None, template: str, *args: object,
        kind: ValueType | None = None
    ):
        """Like `get()`, with the key built from a printf-style template,
        e.g. `get_formatted('', 'network.routes.item%d.src', 0)`."""
        key = template % args if args else template
        return self.get(key, default, kind)

    def getstr(self, key: str, default: str = '') -> str:
        return self.get(key, default, ValueType.STRING)

    def getint(self, key: str, default: int = 0) -> int:
        return self.get(key, default, ValueType.INT)

    def getfloat(self, key: str, default: float = 0.0) -> float:
        """32-bit float, i.e. rounded to single precision."""
        return self.get(key, default, ValueType.FLOAT)

    def getdouble(self, key: str, default: float = 0.0) -> float:
        return self.get(key, default, ValueType.DOUBLE)

    def getbool(self, key: str, default: bool = False) -> bool:
        """`"true"` and `"1"` are True, anything else is False."""
        return self.get(key, default, ValueType.BOOL)

    def set(
        self, key: str, value: SupportedValue,
        kind: ValueType | None = None
    ) -> None:
        """Save `value` under `key` and rewrite the whole file.

        Note: a key without section (no dot) is kept in memory only,
        it never reaches the file.

        Raises:
            SettingsLoadError: the file changed but could not be reloaded.
            SettingsStoreError: the file could not be created or written.
        """
        text = format_value(value, kind)
        with self._lock:
            if not self._handler.exists():
                self._ensure_file()
            # load before write
            if self._is_stale():
                self._reload()
            self._table[key] = text
            self._store()

    def dump(self, file: TextIO | None = None) -> None:
        """Print the current file contents, for debugging."""
        if file is None:
            file = sys.stdout
        try:
            text = self._handler.read_text()
        except OSError as e:
            logging.error(f'Failed to open file: {self._path} ({e})')
            return
        for line in text.splitlines():
            print(line, file=file)
