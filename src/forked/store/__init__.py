"""Document store interface and its SQL implementation."""

from forked.store.base import DocumentStore
from forked.store.sql import SqlDocumentStore

__all__ = [
    "DocumentStore",
    "SqlDocumentStore",
]
