"""Common test fixtures for Signed Store."""

import pytest

from signed_store.crypto import AuthorKeypair, generate_author_keypair
from signed_store.document_store import MemoryDocumentStore
from tests.support.helpers import NOW


@pytest.fixture(scope="session")
def keypair1() -> AuthorKeypair:
    return generate_author_keypair("onee")


@pytest.fixture(scope="session")
def keypair2() -> AuthorKeypair:
    return generate_author_keypair("twoo")


@pytest.fixture
def store() -> MemoryDocumentStore:
    return MemoryDocumentStore("+gardening.xyz", now=NOW)
