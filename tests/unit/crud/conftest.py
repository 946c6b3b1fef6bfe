"""Shared fixtures for crud unit tests"""

from datetime import datetime

import pytest

from docrepo.crud.memory_repo import MemoryRepo
from docrepo.crud.models import Author, Document


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty repository with default match modes."""
    return MemoryRepo()


@pytest.fixture(name="report")
def report_fixture():
    return Document(
        id="a1",
        title="Report Q1",
        content="Quarterly figures",
        author=Author(id="u-7", name="Ada"),
        created=datetime(2023, 1, 5),
    )


@pytest.fixture(name="summary")
def summary_fixture():
    return Document(
        id="b2",
        title="Summary",
        content="Short recap of the quarter",
        author=Author(id="u-9", name="Grace"),
        created=datetime(2023, 2, 10),
    )


@pytest.fixture(name="seeded")
def seeded_fixture(repo, report, summary):
    """Repository holding the report and summary documents."""
    repo.save(report)
    repo.save(summary)
    return repo
