# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:57:10
# @Author : Kariko Lin

"""
Flat INI structure: every entry is addressed by a *combined key*,
i.e. `section.key`, where key itself may contain dots:

    ```ini
    [network]
    routes.item0.src = 10.0.0.1  ; -> network.routes.item0.src
    ```
"""

from collections.abc import MutableMapping
from typing import Iterator

from ..consts import KEY_SEPARATOR


def split_key(combined_key: str) -> list[str]:
    """Split a combined key on dots, dropping empty segments.

    So `a..b` gives `['a', 'b']` and `.a` gives `['a']`.
    """
    return [i for i in combined_key.split(KEY_SEPARATOR) if i]


def make_key(*segments: object) -> str:
    """Join segments into a combined key,
    e.g. `make_key('network', 'routes', 'item0', 'src')`."""
    return KEY_SEPARATOR.join(str(i) for i in segments if str(i))


class ConfigTable(MutableMapping[str, str]):
    """Combined key to raw string value.

    Iterates in sorted key order, the order entries get written back.
    Values *should* be `str`, but empty ones are allowed in memory,
    they just never make it to the file.
    """

    def __init__(self, pairs_to_import: dict[str, str] | None = None) -> None:
        self.__data: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.__data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__data))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigTable):
            return self.__data == other.__data
        return super().__eq__(other)

    def __repr__(self) -> str:
        return 'ConfigTable { .cnt = %d }' % len(self.__data)

    def __str__(self) -> str:
        return ''.join(f'*{k} = {v}\n' for k, v in self.items())

    def clear(self) -> None:
        self.__data.clear()
