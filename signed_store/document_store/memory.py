"""In-memory document store.

Dict-based storage keyed by path, then author. All data is lost when the
store is closed or the process exits.
"""

from collections.abc import Callable
from functools import cmp_to_key

from signed_store.document_store._base import DocumentStoreBase, QueryInput, guarded
from signed_store.document_store.query import (
    clean_up_query,
    document_is_expired,
    latest_first,
    path_asc_author_asc,
    query_matches_doc,
)
from signed_store.documents import Document
from signed_store.exceptions import ValidationError
from signed_store.logging import get_store_logger

logger = get_store_logger(__name__)

_latest_first_key = cmp_to_key(latest_first)
_path_author_key = cmp_to_key(path_asc_author_asc)


class MemoryDocumentStore(DocumentStoreBase):
    """Dict-based document store.

    Storage layout: ``{path: {author: Document}}`` plus a flat string config map.
    """

    def __init__(self, workspace: str, *, now: int | None = None) -> None:
        super().__init__(workspace, now=now)
        self._docs: dict[str, dict[str, Document]] = {}  # path -> author -> Document
        self._config: dict[str, str] = {}
        logger.debug("Created memory document store for %s", workspace)

    # -- config

    @guarded
    def set_config(self, key: str, content: str) -> None:
        self._config[key] = content

    @guarded
    def get_config(self, key: str) -> str | None:
        return self._config.get(key)

    @guarded
    def delete_config(self, key: str) -> None:
        self._config.pop(key, None)

    @guarded
    def delete_all_config(self) -> None:
        self._config = {}

    # -- documents

    @guarded
    def read(self, query: QueryInput = None) -> list[Document]:
        """Return the documents matching ``query``, sorted by path then author.

        Expired documents are never returned. With ``history="latest"`` only
        the winning document of each path is considered.
        """
        query = clean_up_query(query)
        if query.limit == 0 or query.limit_bytes == 0:
            return []

        now = self.now

        if query.path is not None:
            if query.path not in self._docs:
                return []
            paths = [query.path]
        else:
            paths = list(self._docs)

        # the prefix and limit shortcuts below rely on sorted paths
        if query.path_starts_with is not None or query.limit is not None:
            paths.sort()

        results: list[Document] = []
        for path in paths:
            if query.path_starts_with is not None and not path.startswith(query.path_starts_with):
                if path < query.path_starts_with:
                    continue
                break

            docs = list(self._docs[path].values())
            if query.history == "latest":
                docs = [min(docs, key=_latest_first_key)]

            results.extend(doc for doc in docs if query_matches_doc(query, doc) and not document_is_expired(doc, now))

            if query.limit is not None and len(results) >= query.limit:
                break

        results.sort(key=_path_author_key)

        if query.limit is not None:
            results = results[: query.limit]

        if query.limit_bytes is not None:
            total = 0
            for ii, doc in enumerate(results):
                length = doc.content_length
                total += length
                # an empty document right at the byte limit is left out too
                if total > query.limit_bytes or (total == query.limit_bytes and length == 0):
                    results = results[:ii]
                    break

        return results

    @guarded
    def upsert(self, doc: Document) -> None:
        """Store ``doc`` as the document for (doc.path, doc.author).

        The caller has already validated the document and its signature.
        """
        self._docs.setdefault(doc.path, {})[doc.author] = doc

    def _filter_docs(self, should_keep: Callable[[Document], bool]) -> int:
        removed = 0
        for path in list(self._docs):
            slots = self._docs[path]
            doomed = [author for author, doc in slots.items() if not should_keep(doc)]
            for author in doomed:
                del slots[author]
            removed += len(doomed)
            if not slots:
                del self._docs[path]
        return removed

    @guarded
    def forget(self, query: QueryInput) -> None:
        """Permanently delete every document matching ``query``.

        Raises:
            ValidationError: Unless the query's history is ``"all"``.
        """
        query = clean_up_query(query)
        if query.history != "all":
            raise ValidationError('forget can only be called with history: "all"')
        if query.limit == 0 or query.limit_bytes == 0:
            return
        removed = self._filter_docs(lambda doc: not query_matches_doc(query, doc))
        logger.debug("Forgot %d documents in %s", removed, self.workspace)

    @guarded
    def discard_expired(self, now: int | None = None) -> None:
        """Delete every document whose ``delete_after`` has passed."""
        if now is None:
            now = self.now
        removed = self._filter_docs(lambda doc: not document_is_expired(doc, now))
        if removed:
            logger.info("Discarded %d expired documents in %s", removed, self.workspace)

    def _close(self, *, delete: bool) -> None:
        self._docs = {}
        self._config = {}
