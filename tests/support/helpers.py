"""Test helpers for building signed documents."""

from signed_store.crypto import AuthorKeypair
from signed_store.documents import Document, create_signed_document

NOW = 1_500_000_000_000_000  # microseconds

# 3 bytes in utf-8
SNOWMAN = "☃"
SNOWMAN_UTF8 = bytes([0xE2, 0x98, 0x83])


def make_doc(
    keypair: AuthorKeypair,
    path: str,
    content: str = "hello",
    timestamp: int = NOW - 10,
    delete_after: int | None = None,
) -> Document:
    """Create a signed document; timestamp defaults to just before NOW."""
    return create_signed_document(keypair, path=path, content=content, timestamp=timestamp, delete_after=delete_after)
