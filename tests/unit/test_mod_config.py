import pytest

from modconfig_lib.config import ModConfiguration, NamespacedStore, ValueKind
from modconfig_lib.storage import MemoryStorageBackend
from modconfig_lib.config import FilePersistence


def test_typed_accessors_round_trip(store):
    cfg = ModConfiguration(store, 'audio')
    cfg.set_string('device', 'default')
    cfg.set_int('volume', 5)
    cfg.set_float('balance', -0.5)
    cfg.set_double('gain', 1.75)
    cfg.set_bool('muted', False)

    assert cfg.get_string('device', None) == 'default'
    assert cfg.get_int('volume', -1) == 5
    assert cfg.get_float('balance', 0.0) == -0.5
    assert cfg.get_double('gain', 0.0) == 1.75
    assert cfg.get_bool('muted', True) is False


def test_float_and_double_are_distinct_kinds(store):
    cfg = ModConfiguration(store, 'audio')
    cfg.set_float('gain', 2.5)
    assert cfg.get_double('gain', -1.0) == -1.0
    assert store.get_value('audio', 'gain').kind is ValueKind.FLOAT


def test_handles_are_scoped_to_their_namespace(store):
    a = ModConfiguration(store, 'mod.a')
    b = ModConfiguration(store, 'mod.b')
    a.set_int('count', 1)
    assert b.does_key_exist('count') is False
    assert b.get_int('count', 0) == 0
    assert a.get_keys() == ['count']
    assert b.remove_key('count') is False
    assert a.remove_key('count') is True


def test_subscribe_via_handle(store):
    cfg = ModConfiguration(store, 'mod.a')
    events = []
    listener = events.append
    cfg.subscribe(listener)
    store.set_typed('mod.a', 'k', ValueKind.STRING, 'from ui')
    assert [e.text for e in events] == ['from ui']
    assert cfg.unsubscribe(listener) is True


def test_setters_reject_values_of_another_type(store):
    cfg = ModConfiguration(store, 'mod.a')
    with pytest.raises(TypeError):
        cfg.set_bool('b', 'false')
    with pytest.raises(TypeError):
        cfg.set_int('i', 3.9)
    with pytest.raises(TypeError):
        cfg.set_int('i', True)
    with pytest.raises(TypeError):
        cfg.set_string('s', 1)
    assert cfg.get_keys() == []

    cfg.set_double('d', 2)
    assert cfg.get_double('d', None) == 2.0


def test_save_without_persistence_raises(store):
    cfg = ModConfiguration(store, 'mod.a')
    with pytest.raises(RuntimeError):
        cfg.save()


def test_save_uses_bound_namespace():
    store = NamespacedStore()
    backend = MemoryStorageBackend()
    cfg = ModConfiguration(store, 'audio', FilePersistence(store, backend))
    cfg.set_int('volume', 5)
    cfg.save()
    assert list(backend.list_namespaces()) == ['audio']


def test_empty_namespace_rejected(store):
    with pytest.raises(ValueError):
        ModConfiguration(store, '')
