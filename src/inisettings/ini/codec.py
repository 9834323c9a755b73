# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/13 00:41:08
# @Author : Kariko Lin

"""Text <-> `ConfigTable`. No state, no I/O.

Supported syntax is deliberately small:
- `[section]` headers, text after the closing `]` is ignored;
- `key = value` pairs, split at the *first* `=`;
- full-line comments starting with `;` or `#`.

There are no inline comments, `a = b ; c` stores `b ; c`.
Pairs before the first header belong to no section and are dropped.
"""

import logging
from io import StringIO, TextIOBase

from ..consts import COMMENT_MARKS, KEY_SEPARATOR
from .model import ConfigTable, split_key


def readstream(buf: TextIOBase, ins: ConfigTable | None = None) -> ConfigTable:
    """Parse a decoded text stream into `ins` (or a new table).

    Never raises for malformed lines, they are logged and skipped.
    """
    if ins is None:
        ins = ConfigTable()
    section = ''
    # sections which already own a key in this stream.
    filled: set[str] = set()
    for lineno, line in enumerate(buf, 1):
        line = line.strip()
        if not line or line[0] in COMMENT_MARKS:
            continue

        if line[0] == '[':
            end = line.find(']')
            if end == -1:
                logging.warning(f"Line {lineno}: unmatched '[' in {line!r}")
                continue
            section = line[1:end].strip()
            if section in filled:
                logging.warning(
                    f'Line {lineno}: duplicated section name [{section}]')
            continue

        if not section:
            continue
        eq_pos = line.find('=')
        if eq_pos == -1:
            logging.warning(f"Line {lineno}: unmatched '=' in {line!r}")
            continue
        if eq_pos == 0:
            logging.warning(f'Line {lineno}: missing key in {line!r}')
            continue
        key, val = line[:eq_pos].strip(), line[eq_pos + 1:].strip()
        combined_key = section + KEY_SEPARATOR + key
        if combined_key in ins:
            logging.warning(
                f'Line {lineno}: duplicated key name {combined_key}')
        ins[combined_key] = val
        filled.add(section)
    return ins


def parse(text: str) -> ConfigTable:
    return readstream(StringIO(text))


def writestream(buf: TextIOBase, table: ConfigTable) -> None:
    """Write `table` grouped by section.

    Empty values are skipped. A key without any section stops the output,
    everything sorted after it is dropped as well.
    """
    written: set[str] = set()
    for combined_key, value in table.items():
        if not value:
            continue
        segments = split_key(combined_key)
        if len(segments) < 2:
            logging.debug(f'Stop writing at section-less key {combined_key!r}')
            break
        section = segments[0]
        if section not in written:
            if written:
                buf.write('\n')
            buf.write(f'[{section}]\n')
            written.add(section)
        buf.write(f'{KEY_SEPARATOR.join(segments[1:])}={value}\n')


def serialize(table: ConfigTable) -> str:
    buf = StringIO()
    writestream(buf, table)
    return buf.getvalue()
