# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from tests.test_support.fake_clock import FakeClock


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    # Create isolated .rusuku directory (no config file: defaults apply unless a test writes one)
    rusuku_dir = fake_home / ".rusuku"
    rusuku_dir.mkdir()

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("RUSUKU_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from rusuku.config.settings import settings_manager

    settings_manager.config_path = rusuku_dir / "config.json"

    # ! reset output manager to NullOutputManager for test isolation
    from rusuku.core.output import reset_output_manager

    reset_output_manager()

    # ! fresh console so themes pushed by one test don't leak into the next
    from rusuku.rusuku_io.console import reset_console

    reset_console()

    yield fake_home

    from rusuku.config.settings import settings_manager as manager

    manager.config_path = None
    reset_output_manager()


@pytest.fixture
def write_config(isolate_config):
    # Write a config.json into the isolated home & return its path
    def _write(data) -> Path:
        path = isolate_config / ".rusuku" / "config.json"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")

        from rusuku.config.settings import settings_manager

        settings_manager.reset_cache()
        return path

    return _write


@pytest.fixture
def clock():
    # Manually advanced monotonic clock starting at an arbitrary non-zero instant
    return FakeClock(start=1000.0)
