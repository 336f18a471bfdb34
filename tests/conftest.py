# tests/conftest.py
import json

import pytest

from richerror.core.errors import reset_rendering
import richerror.config.loader as config_loader


@pytest.fixture(autouse=True)
def isolated_rendering(tmp_path, monkeypatch):
    """Fresh process-wide render settings and no user config file for every test"""
    reset_rendering()
    monkeypatch.setattr(config_loader, "DEFAULT_CONFIG_PATH", tmp_path / "no-such-config.yml")
    yield
    reset_rendering()


@pytest.fixture
def write_catalog(tmp_path):
    """Write a list of error definitions to a JSON catalog file and return its path"""
    def _write(entries, name="errors.json"):
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def not_found_entry():
    return {
        "code": "NotFound",
        "tags": ["http"],
        "message": "resource missing",
        "includeMap": False,
        "metaData": [{"name": "id", "dataType": "str"}],
    }
