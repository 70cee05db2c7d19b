"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import MemoryRepo


class FakeClock:
    """Deterministic clock; advance() moves time forward."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock(datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture(name="ids")
def ids_fixture():
    """Id factory yielding id-1, id-2, ..."""
    seq = count(1)
    return lambda: f"id-{next(seq)}"


@pytest.fixture(name="repo")
def repo_fixture(clock, ids):
    return MemoryRepo(clock=clock, id_factory=ids)


@pytest.fixture(name="java_doc")
def java_doc_fixture():
    return Document(title="Java Basics", content="Intro to Java", author=Author(id="author1", name="Ann"))


@pytest.fixture(name="spring_doc")
def spring_doc_fixture():
    return Document(title="Spring Framework", content="Beans and DI", author=Author(id="author2", name="Bob"))
