"""Random document identifiers"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 string (122 random bits)."""
    return str(uuid4())
