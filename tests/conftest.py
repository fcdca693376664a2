"""Root test configuration: isolate tests from UDIFF_* variables and config.yaml in the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path_factory, monkeypatch):
    """Clear UDIFF_* env vars and run each test from an empty directory."""
    for name in list(os.environ):
        if name.startswith("UDIFF_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
