"""Tests for path -> Settings bindings and the module level helpers."""

import pytest

import inisettings
from inisettings import SettingsRegistry, ValueType


@pytest.fixture
def ini_path(tmp_path):
    path = str(tmp_path / 'app.ini')
    yield path
    inisettings.destroy_instance(path)


def test_same_path_same_instance(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    registry = SettingsRegistry()
    first = registry.get_instance('app.ini')
    assert registry.get_instance(str(tmp_path / 'app.ini')) is first
    assert registry.get_instance('./x/../app.ini') is first
    assert 'app.ini' in registry
    assert len(registry) == 1


def test_different_paths_are_independent(tmp_path):
    registry = SettingsRegistry()
    one = registry.get_instance(str(tmp_path / 'one.ini'))
    two = registry.get_instance(str(tmp_path / 'two.ini'))
    assert one is not two
    one.set('a.k', 1)
    assert two.get('a.k', 0) == 0


def test_destroy_instance(tmp_path):
    registry = SettingsRegistry()
    path = str(tmp_path / 'app.ini')
    first = registry.get_instance(path)
    assert registry.destroy_instance(path) is True
    assert registry.destroy_instance(path) is False
    second = registry.get_instance(path)
    assert second is not first
    # same identity, though.
    assert second == first


def test_clear(tmp_path):
    registry = SettingsRegistry()
    registry.get_instance(str(tmp_path / 'a.ini'))
    registry.get_instance(str(tmp_path / 'b.ini'))
    registry.clear()
    assert len(registry) == 0


def test_module_helpers(ini_path, capsys):
    inisettings.set_value(ini_path, 'int.key1', 1)
    inisettings.set_value(ini_path, 'float.key1', 2.5, ValueType.FLOAT)
    inisettings.set_value(ini_path, 'network.routes.item0.src', '10.0.0.1')

    assert inisettings.get_value(ini_path, 'int.key1', 0) == 1
    assert inisettings.get_value(ini_path, 'float.key1', 0.0,
                                 ValueType.FLOAT) == 2.5
    assert inisettings.get_value(ini_path, 'int.missing', 9) == 9
    assert inisettings.get_formatted(
        ini_path, '', 'network.routes.item%d.src', 0) == '10.0.0.1'
    assert inisettings.get_full_path(ini_path) == ini_path
    assert inisettings.get_instance(ini_path) is \
        inisettings.default_registry().get_instance(ini_path)

    inisettings.dump(ini_path)
    assert capsys.readouterr().out == (
        "[float]\nkey1=2.5\n\n[int]\nkey1=1\n\n"
        "[network]\nroutes.item0.src=10.0.0.1\n"
    )
