"""Shared pytest fixtures.

The repo root is put on sys.path so tests can import `modconfig_lib`
without installing the package.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def store():
    from modconfig_lib.config import NamespacedStore
    return NamespacedStore()


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / 'Config'


@pytest.fixture
def persistence(store, config_dir):
    from modconfig_lib.config import FilePersistence
    from modconfig_lib.storage import FileStorageBackend
    return FilePersistence(store, FileStorageBackend(config_dir))
