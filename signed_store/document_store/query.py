"""Query model and the pure functions that evaluate it.

A query selects documents by path, author, timestamp and content length,
chooses between the latest document per path and the full history, and
limits the result by count or cumulative content bytes. Every field is
optional; an unset field imposes no constraint.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from signed_store.documents import Document
from signed_store.exceptions import ValidationError

History = Literal["latest", "all"]

DEFAULT_HISTORY: History = "all"


class ContinueAfter(BaseModel):
    """Pagination cursor: results resume strictly after this (path, author)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    author: str


class Query(BaseModel):
    """Filter, history mode and limits for reading documents."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str | None = None
    path_starts_with: str | None = None
    path_ends_with: str | None = None
    author: str | None = None

    timestamp: int | None = None
    timestamp_gt: int | None = None
    timestamp_lt: int | None = None

    content_length: int | None = None
    content_length_gt: int | None = None
    content_length_lt: int | None = None

    continue_after: ContinueAfter | None = None

    history: History | None = None
    limit: int | None = Field(default=None, ge=0)
    limit_bytes: int | None = Field(default=None, ge=0)


def clean_up_query(query: Query | Mapping[str, Any] | None = None) -> Query:
    """Normalize a query: validate it and fill in the default ``history``.

    Idempotent: cleaning an already-clean query returns an equal query.

    Raises:
        ValidationError: If a mapping cannot be turned into a Query.
    """
    if query is None:
        query = Query()
    elif not isinstance(query, Query):
        try:
            query = Query.model_validate(query)
        except PydanticValidationError as e:
            raise ValidationError(f"invalid query: {e}") from e
    if query.history is None:
        query = query.model_copy(update={"history": DEFAULT_HISTORY})
    return query


def query_matches_doc(query: Query, doc: Document) -> bool:
    """Check every set predicate of ``query`` against ``doc``.

    ``history`` and the limits are not per-document predicates and are
    ignored here.
    """
    if query.path is not None and doc.path != query.path:
        return False
    if query.path_starts_with is not None and not doc.path.startswith(query.path_starts_with):
        return False
    if query.path_ends_with is not None and not doc.path.endswith(query.path_ends_with):
        return False
    if query.author is not None and doc.author != query.author:
        return False

    if query.timestamp is not None and doc.timestamp != query.timestamp:
        return False
    if query.timestamp_gt is not None and not doc.timestamp > query.timestamp_gt:
        return False
    if query.timestamp_lt is not None and not doc.timestamp < query.timestamp_lt:
        return False

    if query.content_length is not None and doc.content_length != query.content_length:
        return False
    if query.content_length_gt is not None and not doc.content_length > query.content_length_gt:
        return False
    if query.content_length_lt is not None and not doc.content_length < query.content_length_lt:
        return False

    if query.continue_after is not None:
        cursor = query.continue_after
        if (doc.path, doc.author) <= (cursor.path, cursor.author):
            return False

    return True


def document_is_expired(doc: Document, now: int) -> bool:
    return doc.is_ephemeral and now > doc.delete_after


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def latest_first(a: Document, b: Document) -> int:
    """Comparator: newest timestamp first, ties broken by signature descending.

    This is a total order on signed documents, so every peer holding the same
    documents picks the same latest one.
    """
    return _cmp(b.timestamp, a.timestamp) or _cmp(b.signature, a.signature)


def path_asc_author_asc(a: Document, b: Document) -> int:
    """Comparator: path ascending, then author ascending."""
    return _cmp(a.path, b.path) or _cmp(a.author, b.author)
