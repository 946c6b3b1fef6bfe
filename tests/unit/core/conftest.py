"""Shared fixtures for core unit tests"""

import pytest


SEED_YAML = """\
documents:
  - id: a1
    title: Report Q1
    content: Quarterly figures
    author: {id: u-7, name: Ada}
    created: "2023-01-05T00:00:00"
  - id: b2
    title: Summary
    content: Short recap
    created: "2023-02-10T00:00:00"
  - title: Untitled draft
"""


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path):
    """YAML seed file with two identified documents and one id-less draft."""
    path = tmp_path / "docs.yaml"
    path.write_text(SEED_YAML)
    return path
