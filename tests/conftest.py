"""Root test configuration: isolate tests from ambient DOCREPO_* settings"""

import logging

import pytest

from docrepo.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCREPO_<FIELD> env vars so load_config sees only what a test sets."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCREPO_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def restore_root_level():
    """Undo any root logger level change made through configure_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
