"""Signed Store - cryptographically authenticated document store core.

Every document lives at a path, is written by one author identity and
carries that author's signature. A store keeps one document per
(path, author); when several authors write the same path, every peer picks
the same "latest" document (newest timestamp, ties broken by signature)
without coordination.

Quick Start:
    >>> from signed_store import MemoryDocumentStore, create_signed_document, generate_author_keypair
    >>>
    >>> keypair = generate_author_keypair("suzy")
    >>> doc = create_signed_document(keypair, path="/wiki/kittens", content="meow", timestamp=1_000_000)
    >>> store = MemoryDocumentStore("+gardening.abc")
    >>> store.upsert(doc)
    >>> store.get_content("/wiki/kittens")
    'meow'
"""

from .crypto import (
    AuthorKeypair,
    check_author_keypair_is_valid,
    decode_base32,
    encode_base32,
    generate_author_keypair,
    sha256_base32,
    sign,
    verify,
)
from .document_store import DocumentStore, MemoryDocumentStore, Query, clean_up_query
from .documents import Document, create_signed_document, document_signature_is_valid, sign_document
from .exceptions import DecodeError, SignedStoreError, StoreClosedError, ValidationError
from .logging import LoggingConfig, get_store_logger, setup_logging
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    "AuthorKeypair",
    "DecodeError",
    "Document",
    "DocumentStore",
    "LoggingConfig",
    "MemoryDocumentStore",
    "Query",
    "Settings",
    "SignedStoreError",
    "StoreClosedError",
    "ValidationError",
    "check_author_keypair_is_valid",
    "clean_up_query",
    "create_signed_document",
    "decode_base32",
    "document_signature_is_valid",
    "encode_base32",
    "generate_author_keypair",
    "get_store_logger",
    "settings",
    "setup_logging",
    "sha256_base32",
    "sign",
    "sign_document",
    "verify",
]
