"""
Shared pytest fixtures for hashkit tests.

- Every test starts with an empty service container and no HASHKIT_*
  environment variables.
- hasher / tokens: fresh service instances with a no-op logger.
"""

import os
from pathlib import Path

import pytest

from hashkit.core.bootstrap import reset
from hashkit.core.settings import HashkitSettings, load_settings
from hashkit.services.hashing import Hasher
from hashkit.services.logging import NullLogger
from hashkit.services.token import TokenGenerator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the container singleton and HASHKIT_* variables."""
    for name in list(os.environ):
        if name.startswith("HASHKIT_"):
            monkeypatch.delenv(name)
    reset()
    yield
    reset()


@pytest.fixture
def hasher() -> Hasher:
    return Hasher(logger=NullLogger())


@pytest.fixture
def tokens() -> TokenGenerator:
    return TokenGenerator(logger=NullLogger())


@pytest.fixture
def settings(tmp_path: Path) -> HashkitSettings:
    """Settings resolved from defaults only (no config file above tmp_path)."""
    return load_settings(start_dir=str(tmp_path))
