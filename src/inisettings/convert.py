# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/13 19:32:51
# @Author : Kariko Lin

"""Raw string <-> typed value.

Numbers are parsed leniently: the longest valid decimal *prefix* wins,
so `"12px"` reads as `12` and `"1.5e3ms"` as `1500.0`.
This keeps files written by other tools readable.
"""

import logging
import math
from re import ASCII, IGNORECASE
from re import compile as regex
from struct import pack, unpack
from typing import Callable

from .consts import (
    FLT32_MAX, INT32_MAX, INT32_MIN, TRUE_LITERALS, ValueType
)

_INT_PREFIX = regex(r'[+-]?\d+', ASCII)
_FLOAT_PREFIX = regex(
    r'[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)',
    IGNORECASE | ASCII)

SupportedValue = str | int | float | bool


def to_float32(value: float) -> float:
    """Round a python float through IEEE single precision."""
    return unpack('f', pack('f', value))[0]


def kind_of(value: object) -> ValueType:
    """Guess `ValueType` from a python value.

    `float` maps to DOUBLE, as that is what a python float is.
    """
    # bool is an int subclass, check it first.
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, int):
        return ValueType.INT
    if isinstance(value, float):
        return ValueType.DOUBLE
    if value is None or isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f'Unsupported setting value type: {type(value).__name__}')


def _parse_int(raw: str) -> int:
    if (m := _INT_PREFIX.match(raw)) is None:
        raise ValueError(f'no integer in {raw!r}')
    ret = int(m.group())
    if not INT32_MIN <= ret <= INT32_MAX:
        raise ValueError(f'{raw!r} is out of 32-bit integer range')
    return ret


def _parse_double(raw: str) -> float:
    if (m := _FLOAT_PREFIX.match(raw)) is None:
        raise ValueError(f'no number in {raw!r}')
    ret = float(m.group())
    if math.isinf(ret) and 'inf' not in m.group().lower():
        raise ValueError(f'{raw!r} is out of double range')
    return ret


def _parse_float(raw: str) -> float:
    ret = _parse_double(raw)
    if math.isfinite(ret) and abs(ret) > FLT32_MAX:
        raise ValueError(f'{raw!r} is out of float range')
    return to_float32(ret)


def _parse_bool(raw: str) -> bool:
    return raw in TRUE_LITERALS


_PARSERS: dict[ValueType, Callable[[str], SupportedValue]] = {
    ValueType.STRING: str,
    ValueType.INT: _parse_int,
    ValueType.FLOAT: _parse_float,
    ValueType.DOUBLE: _parse_double,
    ValueType.BOOL: _parse_bool,
}


def convert_value(raw: str, default, kind: ValueType):
    """Typed value of `raw`, or `default` when `raw` is empty.

    Numbers without any valid prefix, or out of range,
    also fall back to `default` (with a warning).
    """
    if not raw:
        return default
    try:
        return _PARSERS[kind](raw)
    except ValueError as e:
        logging.warning(f'Cannot read {raw!r} as {kind.value}: {e}')
        return default


def _format_float(value: float) -> str:
    if math.isfinite(value) and abs(value) > FLT32_MAX:
        raise ValueError(f'{value} is out of float range')
    f32 = to_float32(value)
    if not math.isfinite(f32):
        return repr(f32)
    # shortest text that still gives the same single.
    for precision in range(1, 10):
        ret = '%.*g' % (precision, f32)
        if to_float32(float(ret)) == f32:
            return ret
    return repr(f32)


def _format_int(value: int) -> str:
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f'{value} is out of 32-bit integer range')
    return str(int(value))


def _format_bool(value: bool) -> str:
    return '1' if value else '0'


def _format_double(value: float) -> str:
    return repr(float(value))


_FORMATTERS: dict[ValueType, Callable[..., str]] = {
    ValueType.STRING: str,
    ValueType.INT: _format_int,
    ValueType.FLOAT: _format_float,
    ValueType.DOUBLE: _format_double,
    ValueType.BOOL: _format_bool,
}


def format_value(value: SupportedValue, kind: ValueType | None = None) -> str:
    """Canonical text of `value` as written to the ini file."""
    if value is None:
        raise TypeError('None cannot be stored as a setting value')
    if kind is None:
        kind = kind_of(value)
    return _FORMATTERS[ValueType(kind)](value)
