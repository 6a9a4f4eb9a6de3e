"""Tests for query normalization, matching and document orderings."""

from functools import cmp_to_key

import pytest

from signed_store.crypto import AuthorKeypair
from signed_store.document_store.query import (
    ContinueAfter,
    Query,
    clean_up_query,
    document_is_expired,
    latest_first,
    path_asc_author_asc,
    query_matches_doc,
)
from signed_store.documents import Document
from signed_store.exceptions import ValidationError
from tests.support.helpers import SNOWMAN, make_doc


def _doc(path: str = "/a", author: str = "@aaaa.bx", timestamp: int = 10, signature: str = "bsig", content: str = "") -> Document:
    return Document(path=path, author=author, timestamp=timestamp, signature=signature, content=content)


class TestCleanUpQuery:
    def test_defaults_history_to_all(self):
        assert clean_up_query(Query()).history == "all"
        assert clean_up_query(None).history == "all"
        assert clean_up_query({}).history == "all"

    def test_keeps_explicit_history(self):
        assert clean_up_query({"history": "latest"}).history == "latest"

    def test_leaves_numeric_bounds_unset(self):
        query = clean_up_query({"path": "/a"})
        assert query.limit is None
        assert query.limit_bytes is None
        assert query.timestamp_gt is None

    def test_idempotent(self):
        once = clean_up_query({"path_starts_with": "/a", "limit": 3})
        assert clean_up_query(once) == once
        assert clean_up_query(clean_up_query(once)) == once

    @pytest.mark.parametrize(
        "raw",
        [{"history": "newest"}, {"limit": -1}, {"limit_bytes": -5}, {"nonsense": 1}, {"path": 5}],
    )
    def test_invalid_queries_raise(self, raw: dict):
        with pytest.raises(ValidationError):
            clean_up_query(raw)


class TestQueryMatchesDoc:
    def test_empty_query_matches_everything(self):
        assert query_matches_doc(clean_up_query(None), _doc())

    def test_path(self):
        assert query_matches_doc(Query(path="/a"), _doc(path="/a"))
        assert not query_matches_doc(Query(path="/a"), _doc(path="/ab"))

    def test_path_prefix_and_suffix(self):
        doc = _doc(path="/wiki/kittens.md")
        assert query_matches_doc(Query(path_starts_with="/wiki/"), doc)
        assert not query_matches_doc(Query(path_starts_with="/blog/"), doc)
        assert query_matches_doc(Query(path_ends_with=".md"), doc)
        assert not query_matches_doc(Query(path_ends_with=".txt"), doc)

    def test_author(self):
        assert query_matches_doc(Query(author="@aaaa.bx"), _doc())
        assert not query_matches_doc(Query(author="@bbbb.bx"), _doc())

    def test_timestamp_bounds_are_strict(self):
        doc = _doc(timestamp=10)
        assert query_matches_doc(Query(timestamp=10), doc)
        assert not query_matches_doc(Query(timestamp=11), doc)
        assert query_matches_doc(Query(timestamp_gt=9), doc)
        assert not query_matches_doc(Query(timestamp_gt=10), doc)
        assert query_matches_doc(Query(timestamp_lt=11), doc)
        assert not query_matches_doc(Query(timestamp_lt=10), doc)

    def test_content_length_uses_bytes(self):
        doc = _doc(content=SNOWMAN)
        assert query_matches_doc(Query(content_length=3), doc)
        assert not query_matches_doc(Query(content_length=1), doc)
        assert query_matches_doc(Query(content_length_gt=2), doc)
        assert not query_matches_doc(Query(content_length_gt=3), doc)
        assert query_matches_doc(Query(content_length_lt=4), doc)
        assert not query_matches_doc(Query(content_length_lt=3), doc)

    def test_continue_after(self):
        cursor = ContinueAfter(path="/b", author="@bbbb.bx")
        query = Query(continue_after=cursor)
        assert not query_matches_doc(query, _doc(path="/a", author="@zzzz.bx"))
        assert not query_matches_doc(query, _doc(path="/b", author="@aaaa.bx"))
        assert not query_matches_doc(query, _doc(path="/b", author="@bbbb.bx"))
        assert query_matches_doc(query, _doc(path="/b", author="@cccc.bx"))
        assert query_matches_doc(query, _doc(path="/c", author="@aaaa.bx"))

    def test_conjunction(self):
        query = Query(path_starts_with="/a", author="@aaaa.bx", timestamp_gt=5)
        assert query_matches_doc(query, _doc(path="/ab", timestamp=6))
        assert not query_matches_doc(query, _doc(path="/ab", timestamp=5))
        assert not query_matches_doc(query, _doc(path="/b", timestamp=6))


class TestDocumentIsExpired:
    def test_permanent_document_never_expires(self):
        assert document_is_expired(_doc(), 10**18) is False

    def test_expires_strictly_after_delete_after(self):
        doc = _doc().model_copy(update={"delete_after": 100})
        assert document_is_expired(doc, 99) is False
        assert document_is_expired(doc, 100) is False
        assert document_is_expired(doc, 101) is True

    def test_only_ephemeral_documents_expire(self):
        permanent = _doc()
        ephemeral = permanent.model_copy(update={"delete_after": 0})
        assert not permanent.is_ephemeral
        assert ephemeral.is_ephemeral
        assert document_is_expired(permanent, 1) is False
        assert document_is_expired(ephemeral, 1) is True


class TestLatestFirst:
    def test_newer_timestamp_first(self):
        old, new = _doc(timestamp=1, signature="bzzz"), _doc(timestamp=2, signature="baaa")
        assert sorted([old, new], key=cmp_to_key(latest_first)) == [new, old]

    def test_signature_breaks_ties_descending(self):
        low, high = _doc(signature="baaa"), _doc(signature="bbbb")
        assert latest_first(high, low) < 0
        assert latest_first(low, high) > 0
        assert sorted([low, high], key=cmp_to_key(latest_first))[0] is high

    def test_total_order(self):
        doc = _doc()
        assert latest_first(doc, doc) == 0

    def test_real_signatures_tie_break_stable(self, keypair1: AuthorKeypair, keypair2: AuthorKeypair):
        a = make_doc(keypair1, "/a", timestamp=5)
        b = make_doc(keypair2, "/a", timestamp=5)
        first = sorted([a, b], key=cmp_to_key(latest_first))[0]
        assert first == sorted([b, a], key=cmp_to_key(latest_first))[0]
        assert first.signature == max(a.signature, b.signature)


class TestPathAscAuthorAsc:
    def test_orders_by_path_then_author(self):
        docs = [_doc(path="/b", author="@aaaa.bx"), _doc(path="/a", author="@bbbb.bx"), _doc(path="/a", author="@aaaa.bx")]
        ordered = sorted(docs, key=cmp_to_key(path_asc_author_asc))
        assert [(d.path, d.author) for d in ordered] == [("/a", "@aaaa.bx"), ("/a", "@bbbb.bx"), ("/b", "@aaaa.bx")]
