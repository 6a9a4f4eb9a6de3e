"""Canonical hashing and signing of documents.

The canonical form is one ``<field>\\t<value>\\n`` line per signed field, in
alphabetical field order. Content is represented by its hash and the
signature itself is excluded; ``delete_after`` is omitted when unset.
"""

from pydantic import ValidationError as PydanticValidationError

from signed_store.crypto import AuthorKeypair, sha256_base32, sign, verify
from signed_store.documents.document import Document
from signed_store.exceptions import ValidationError

_SIGNED_FIELDS = ("author", "content_hash", "delete_after", "path", "timestamp")


def canonical_document_text(doc: Document) -> str:
    lines = []
    for name in _SIGNED_FIELDS:
        value = getattr(doc, name)
        if value is None:
            continue
        lines.append(f"{name}\t{value}\n")
    return "".join(lines)


def hash_document(doc: Document) -> str:
    """Multibase base32 sha256 of the document's canonical form."""
    return sha256_base32(canonical_document_text(doc))


def sign_document(keypair: AuthorKeypair, doc: Document) -> Document:
    """Return a copy of ``doc`` with ``content_hash`` and ``signature`` filled in.

    Raises:
        ValidationError: If the document author is not the keypair's address,
            or the keypair cannot be used for signing.
    """
    if doc.author != keypair.address:
        raise ValidationError(f"document author {doc.author!r} does not match keypair address {keypair.address!r}")
    hashed = doc.model_copy(update={"content_hash": sha256_base32(doc.content), "signature": ""})
    return hashed.model_copy(update={"signature": sign(keypair, hash_document(hashed))})


def create_signed_document(
    keypair: AuthorKeypair,
    *,
    path: str,
    content: str,
    timestamp: int,
    delete_after: int | None = None,
) -> Document:
    """Build and sign a new document authored by ``keypair``.

    Raises:
        ValidationError: If the fields do not form a valid document or the
            keypair cannot sign.
    """
    try:
        doc = Document(
            path=path, author=keypair.address, content=content, timestamp=timestamp, delete_after=delete_after
        )
    except PydanticValidationError as e:
        raise ValidationError(f"invalid document: {e}") from e
    return sign_document(keypair, doc)


def document_signature_is_valid(doc: Document) -> bool:
    """Check content hash and author signature. Never raises."""
    if sha256_base32(doc.content) != doc.content_hash:
        return False
    return verify(doc.author, doc.signature, hash_document(doc))
