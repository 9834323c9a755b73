# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 01:16:53
# @Author : Kariko Lin

from .codec import parse, readstream, serialize, writestream
from .model import ConfigTable, make_key, split_key
from .parser import FileStamp, IniFileHandler
