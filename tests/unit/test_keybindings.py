import logging

import pytest

from modconfig_lib.config import ModConfiguration
from modconfig_lib.keybindings import Key, Keybindings, UnknownKeybindingError


@pytest.fixture
def host_config(store):
    return ModConfiguration(store, 'modconfig')


def test_add_keybinding_registers_copy_of_default(host_config):
    kb = Keybindings(host_config)
    default = Key('LeftControl', 'K')
    key = kb.add_keybinding('console', 'toggle', default)
    assert key == default
    assert key is not default
    assert kb.get('console', 'toggle') is key


def test_add_existing_keybinding_ignores_default(host_config):
    kb = Keybindings(host_config)
    first = kb.add_keybinding('console', 'toggle', Key('LeftControl', 'K'))
    second = kb.add_keybinding('console', 'toggle', Key('LeftShift', 'J'))
    assert second is first
    assert str(second) == 'LeftControl+K'


@pytest.mark.parametrize('mod,name', [
    ('console:extra', 'toggle'),
    ('console', 'toggle:alt'),
])
def test_add_keybinding_rejects_colon_in_names(host_config, mod, name):
    kb = Keybindings(host_config)
    with pytest.raises(ValueError):
        kb.add_keybinding(mod, name, Key('LeftControl', 'K'))
    assert kb.all_keybindings() == {}
    kb.save_to_config()
    assert host_config.get_keys() == []


def test_get_unknown_keybinding_raises(host_config):
    kb = Keybindings(host_config)
    kb.add_keybinding('console', 'toggle', Key('None', 'F1'))
    with pytest.raises(UnknownKeybindingError):
        kb.get('console', 'missing')
    with pytest.raises(KeyError):
        kb.get('other', 'toggle')


def test_key_str_without_modifier():
    assert str(Key('None', 'F1')) == 'F1'
    assert str(Key('', 'F2')) == 'F2'
    assert Key('', 'F2').modifier == 'None'


def test_save_and_load_round_trip(store, host_config):
    kb = Keybindings(host_config)
    kb.add_keybinding('console', 'toggle', Key('LeftControl', 'K'))
    kb.add_keybinding('map', 'open', Key('None', 'M'))
    kb.save_to_config()

    assert host_config.get_string('keybinding:console:toggle:modifier', None) == 'LeftControl'
    assert host_config.get_string('keybinding:map:open:trigger', None) == 'M'

    restored = Keybindings(ModConfiguration(store, 'modconfig'))
    assert restored.load_from_config() == 2
    assert restored.get('console', 'toggle') == Key('LeftControl', 'K')
    assert restored.get('map', 'open') == Key('None', 'M')


def test_load_updates_existing_key_in_place(host_config):
    kb = Keybindings(host_config)
    key = kb.add_keybinding('console', 'toggle', Key('LeftControl', 'K'))
    host_config.set_string('keybinding:console:toggle:modifier', 'LeftAlt')
    host_config.set_string('keybinding:console:toggle:trigger', 'T')
    kb.load_from_config()
    assert key.modifier == 'LeftAlt'
    assert key.trigger == 'T'
    assert kb.get('console', 'toggle') is key


def test_load_skips_malformed_entries(host_config, caplog):
    caplog.set_level(logging.ERROR)
    host_config.set_string('keybinding:broken', 'x')
    host_config.set_string('keybinding:console:half:modifier', 'LeftControl')
    host_config.set_string('unrelated', 'value')
    kb = Keybindings(host_config)

    assert kb.load_from_config() == 0
    assert kb.all_keybindings() == {}
    assert 'Invalid keybinding format' in caplog.text
    assert 'console:half' in caplog.text
