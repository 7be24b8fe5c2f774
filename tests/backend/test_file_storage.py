import pytest

from modconfig_lib.storage import FileStorageBackend, MemoryStorageBackend


def test_save_load_and_list(tmp_path):
    b = FileStorageBackend(config_dir=tmp_path / 'Config')
    b.save('audio', b'[]')
    assert b.exists('audio') is True
    assert (tmp_path / 'Config' / 'audio.json').read_bytes() == b'[]'
    assert list(b.list_namespaces()) == ['audio']
    assert b.load('audio') == b'[]'
    assert b.exists('video') is False
    with pytest.raises(KeyError):
        b.load('video')


def test_list_creates_directory_and_filters_extension(tmp_path):
    d = tmp_path / 'missing' / 'Config'
    b = FileStorageBackend(config_dir=d, extension='yml')
    assert list(b.list_namespaces()) == []
    assert d.is_dir()
    (d / 'a.yml').write_text('[]')
    (d / 'b.json').write_text('[]')
    (d / 'a.yml.tmp').write_text('[]')
    assert list(b.list_namespaces()) == ['a']


def test_save_replaces_previous_content(tmp_path):
    b = FileStorageBackend(config_dir=tmp_path)
    b.save('ns', b'a much longer first payload')
    b.save('ns', b'short')
    assert b.load('ns') == b'short'
    assert not (tmp_path / 'ns.json.tmp').exists()


@pytest.mark.parametrize('namespace', ['', '..', 'a/b', 'a\\b'])
def test_invalid_namespace_rejected(tmp_path, namespace):
    b = FileStorageBackend(config_dir=tmp_path)
    with pytest.raises(ValueError):
        b.save(namespace, b'[]')


def test_memory_backend_basic_operations():
    m = MemoryStorageBackend()
    m.save('b', b'2')
    m.save('a', b'1')
    assert m.load('a') == b'1'
    assert m.exists('a') is True
    assert list(m.list_namespaces()) == ['a', 'b']
    assert m.exists('c') is False
    with pytest.raises(KeyError):
        m.load('c')
