"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


T1 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)
T3 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_doc(
    id: str = None,
    title: str = "Intro to X",
    content: str = "hello world",
    author_id: str = "a1",
    created: datetime = T1,
    ) -> Document:
    return Document(id=id, title=title, content=content,
                    author=Author(id=author_id, name=f"Author {author_id}"), created=created)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory building a Document with sensible defaults."""
    return _make_doc


@pytest.fixture(name="repo")
def repo_fixture():
    """Fresh store per test using the default policies (advance ids, OR search)."""
    return MemoryRepo()


@pytest.fixture(name="seeded")
def seeded_fixture(repo):
    """Store holding three documents ids 1-3 by authors a1, a2, a3."""
    repo.save(_make_doc(title="Intro to X", content="hello world", author_id="a1", created=T1))
    repo.save(_make_doc(title="Advanced Y", content="deep dive", author_id="a2", created=T2))
    repo.save(_make_doc(title="Intro to Z", content="another hello", author_id="a3", created=T3))
    return repo
