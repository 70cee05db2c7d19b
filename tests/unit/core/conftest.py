"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="doc")
def doc_fixture():
    return Document(
        id="d1",
        title="Java Basics",
        content="Variables, loops and classes",
        author=Author(id="author1", name="Ann"),
        created=T0,
    )
