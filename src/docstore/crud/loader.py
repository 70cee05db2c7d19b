"""Read document payloads from a YAML/JSON file and populate a repository"""

from pathlib import Path

import yaml

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


def load_documents(path: str | Path) -> list[Document]:
    """Parse a list of documents, or a mapping with a 'documents' list, from path.

    Raises ValueError for unparseable files or an unexpected top-level shape.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents or a 'documents' key")
    return [Document.model_validate(item) for item in data]


def populate(repo: DocumentRepo, docs: list[Document]) -> list[Document]:
    """Save each document in order and return the stored versions."""
    return [repo.save(d) for d in docs]
