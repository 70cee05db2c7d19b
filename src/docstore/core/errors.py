"""Exception types raised by docstore"""


class DocstoreError(Exception):
    """Base class for docstore errors."""


class IdGenerationError(DocstoreError, RuntimeError):
    """No unused identifier was found within the configured number of attempts.

    Never expected with random ids; signals a broken id factory.
    """
