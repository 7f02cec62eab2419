"""Graph document import/export."""

from .document import (
    GraphDocument,
    to_document,
    from_document,
    dumps_document,
    write_document,
    read_document,
    default_filename,
)

__all__ = [
    "GraphDocument",
    "to_document",
    "from_document",
    "dumps_document",
    "write_document",
    "read_document",
    "default_filename",
]
