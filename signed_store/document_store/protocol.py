"""Document store protocol.

Defines the surface that every store backend exposes to the ingestion
pipeline and to readers.
"""

from typing import Protocol, runtime_checkable

from signed_store.document_store._base import QueryInput
from signed_store.documents import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document storage backends.

    Implementations: MemoryDocumentStore.
    """

    workspace: str

    @property
    def now(self) -> int:
        """Current time in microseconds, as used for expiration."""
        ...

    def read(self, query: QueryInput = None) -> list[Document]:
        """Return matching, non-expired documents sorted by path then author."""
        ...

    def upsert(self, doc: Document) -> None:
        """Store an already-validated document, replacing the author's previous version at its path."""
        ...

    def forget(self, query: QueryInput) -> None:
        """Delete every matching document. Only ``history="all"`` queries are accepted."""
        ...

    def discard_expired(self, now: int | None = None) -> None:
        """Delete every expired document."""
        ...

    def close(self, *, delete: bool = False) -> None:
        """Release contents; the store is unusable afterwards."""
        ...

    def is_closed(self) -> bool: ...

    def set_config(self, key: str, content: str) -> None: ...

    def get_config(self, key: str) -> str | None: ...

    def delete_config(self, key: str) -> None: ...

    def delete_all_config(self) -> None: ...
