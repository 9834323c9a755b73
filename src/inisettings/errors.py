# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:11:02
# @Author : Kariko Lin


class SettingsError(Exception):
    """Base of all unrecoverable settings I/O failures."""
    pass


class SettingsLoadError(SettingsError):
    """The ini file exists but could not be read while a reload was needed."""
    pass


class SettingsStoreError(SettingsError):
    """The ini file (or its parent folder) could not be created or written."""
    pass
