# -*- encoding: utf-8 -*-
# @File   : registry.py
# @Time   : 2026/10/14 00:52:13
# @Author : Kariko Lin

"""Path -> `Settings` bindings.

A `SettingsRegistry` hands out exactly one `Settings` per canonical path,
so every caller shares the same table and the same lock. Hold your own
registry and pass the `Settings` around, or use the helpers below,
which share a registry created on first use.
"""

import threading

from .consts import DEFAULT_ENCODING, ValueType
from .convert import SupportedValue
from .settings import Settings, canonical_path


class SettingsRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._instances: dict[str, Settings] = {}

    def get_instance(
        self, path: str, encoding: str = DEFAULT_ENCODING
    ) -> Settings:
        """The `Settings` bound to `path`, created on first request.

        `encoding` only matters for that first request.
        """
        key = canonical_path(path)
        with self._lock:
            if (ins := self._instances.get(key)) is None:
                ins = self._instances[key] = Settings(key, encoding)
            return ins

    def destroy_instance(self, path: str) -> bool:
        """Tear down the binding of `path`.

        Returns:
            `True` if there was one.
        """
        with self._lock:
            return self._instances.pop(canonical_path(path), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        with self._lock:
            return canonical_path(path) in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


_default_registry: SettingsRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> SettingsRegistry:
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = SettingsRegistry()
        return _default_registry


def get_instance(path: str, encoding: str = DEFAULT_ENCODING) -> Settings:
    return default_registry().get_instance(path, encoding)


def destroy_instance(path: str) -> bool:
    return default_registry().destroy_instance(path)


def get_value(
    path: str, key: str, default: SupportedValue | None = None,
    kind: ValueType | None = None
):
    return get_instance(path).get(key, default, kind)


def get_formatted(
    path: str, default: SupportedValue | None, template: str, *args: object,
    kind: ValueType | None = None
):
    return get_instance(path).get_formatted(default, template, *args,
                                            kind=kind)


def set_value(
    path: str, key: str, value: SupportedValue,
    kind: ValueType | None = None
) -> None:
    get_instance(path).set(key, value, kind)


def get_full_path(path: str) -> str:
    return get_instance(path).full_path


def dump(path: str) -> None:
    get_instance(path).dump()
