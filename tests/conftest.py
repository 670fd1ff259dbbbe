import json
import os

import pytest

from passgen.config import config_path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep config reads/writes out of the real user profile
    monkeypatch.delenv("PASSGEN_CONFIG", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_config():
    """Write a config file by hand, bypassing save_config's checks."""
    def write(content):
        p = config_path()
        os.makedirs(os.path.dirname(p), exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)
        return p
    return write
