"""Shared behaviour for document store backends.

Owns the lock, the closed flag, the clock and the read helpers that can be
expressed in terms of ``read``. Backends implement the storage primitives.
"""

import functools
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ParamSpec, TypeVar

from signed_store.document_store.query import Query
from signed_store.documents import Document
from signed_store.exceptions import StoreClosedError
from signed_store.logging import get_store_logger
from signed_store.settings import settings

logger = get_store_logger(__name__)

_P = ParamSpec("_P")
_R = TypeVar("_R")

QueryInput = Query | Mapping[str, Any] | None


def guarded(method: Callable[_P, _R]) -> Callable[_P, _R]:
    """Run a store method under the store lock, failing fast once closed."""

    @functools.wraps(method)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        store = args[0]
        assert isinstance(store, DocumentStoreBase)
        with store._lock:
            if store._closed:
                raise StoreClosedError(f"store for {store.workspace} is closed; can't call {method.__name__}()")
            return method(*args, **kwargs)

    return wrapper


class DocumentStoreBase(ABC):
    """Base class for document stores holding one document per (path, author).

    Every public operation is wrapped with ``guarded``. The lock is reentrant
    so helpers may call other guarded methods.
    """

    def __init__(self, workspace: str, *, now: int | None = None) -> None:
        self.workspace = workspace
        self._now = now
        self._closed = False
        self._lock = threading.RLock()

    @property
    def now(self) -> int:
        """Current time in microseconds: store override, then settings, then wall clock."""
        if self._now is not None:
            return self._now
        if settings.now_override is not None:
            return settings.now_override
        return time.time_ns() // 1000

    @now.setter
    def now(self, value: int | None) -> None:
        self._now = value

    def is_closed(self) -> bool:
        return self._closed

    # -- primitives implemented by backends

    @abstractmethod
    def read(self, query: QueryInput = None) -> list[Document]: ...

    @abstractmethod
    def upsert(self, doc: Document) -> None: ...

    @abstractmethod
    def forget(self, query: QueryInput) -> None: ...

    @abstractmethod
    def discard_expired(self, now: int | None = None) -> None: ...

    @abstractmethod
    def set_config(self, key: str, content: str) -> None: ...

    @abstractmethod
    def get_config(self, key: str) -> str | None: ...

    @abstractmethod
    def delete_config(self, key: str) -> None: ...

    @abstractmethod
    def delete_all_config(self) -> None: ...

    @abstractmethod
    def _close(self, *, delete: bool) -> None: ...

    # -- derived reads

    @guarded
    def paths(self, query: QueryInput = None) -> list[str]:
        """Sorted distinct paths of the documents matching ``query``."""
        return sorted({doc.path for doc in self.read(query)})

    @guarded
    def contents(self, query: QueryInput = None) -> list[str]:
        """Content of each document matching ``query``, in read order."""
        return [doc.content for doc in self.read(query)]

    @guarded
    def authors(self) -> list[str]:
        """Sorted distinct authors with at least one non-expired document."""
        return sorted({doc.author for doc in self.read(Query(history="all"))})

    @guarded
    def get_document(self, path: str) -> Document | None:
        """Latest document at ``path``, or None."""
        docs = self.read(Query(path=path, history="latest"))
        return docs[0] if docs else None

    @guarded
    def get_content(self, path: str) -> str | None:
        doc = self.get_document(path)
        return None if doc is None else doc.content

    def close(self, *, delete: bool = False) -> None:
        """Release the store's contents. Terminal: every later call raises StoreClosedError.

        Args:
            delete: Also destroy any persisted data (backend specific).
        """
        with self._lock:
            if self._closed:
                raise StoreClosedError(f"store for {self.workspace} is already closed")
            self._closed = True
            self._close(delete=delete)
        logger.info("Closed document store for %s", self.workspace)
