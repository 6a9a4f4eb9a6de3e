"""Document index, query engine and store protocol."""

from .memory import MemoryDocumentStore
from .protocol import DocumentStore
from .query import (
    ContinueAfter,
    History,
    Query,
    clean_up_query,
    document_is_expired,
    latest_first,
    path_asc_author_asc,
    query_matches_doc,
)

__all__ = [
    "ContinueAfter",
    "DocumentStore",
    "History",
    "MemoryDocumentStore",
    "Query",
    "clean_up_query",
    "document_is_expired",
    "latest_first",
    "path_asc_author_asc",
    "query_matches_doc",
]
