# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:05:16
# @Author : Kariko Lin

from enum import Enum


class ValueType(str, Enum):
    """Value types a setting can be read or written as.

    Raw values are always strings on disk, typing only happens
    at the `Settings.get()` / `Settings.set()` boundary.
    """
    STRING = 'string'
    INT = 'int'      # 32-bit
    FLOAT = 'float'  # 32-bit, IEEE single precision
    DOUBLE = 'double'
    BOOL = 'bool'


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
# largest finite single precision value.
FLT32_MAX = 3.4028234663852886e+38

KEY_SEPARATOR = '.'
COMMENT_MARKS = (';', '#')
TRUE_LITERALS = ('true', '1')

DEFAULT_ENCODING = 'utf-8'
