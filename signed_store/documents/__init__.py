"""Signed document model and signing helpers."""

from .document import Document
from .signing import (
    canonical_document_text,
    create_signed_document,
    document_signature_is_valid,
    hash_document,
    sign_document,
)

__all__ = [
    "Document",
    "canonical_document_text",
    "create_signed_document",
    "document_signature_is_valid",
    "hash_document",
    "sign_document",
]
