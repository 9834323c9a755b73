# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:01:52
# @Author : Kariko Lin

import logging

from .consts import ValueType
from .errors import SettingsError, SettingsLoadError, SettingsStoreError
from .ini import ConfigTable, IniFileHandler, make_key, parse, serialize
from .registry import (
    SettingsRegistry,
    default_registry,
    destroy_instance,
    dump,
    get_formatted,
    get_full_path,
    get_instance,
    get_value,
    set_value,
)
from .settings import Settings

__all__ = [
    'ValueType', 'ConfigTable', 'IniFileHandler', 'make_key',
    'parse', 'serialize',
    'Settings', 'SettingsRegistry', 'default_registry',
    'get_instance', 'destroy_instance', 'get_value', 'get_formatted',
    'set_value', 'get_full_path', 'dump',
    'SettingsError', 'SettingsLoadError', 'SettingsStoreError',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
