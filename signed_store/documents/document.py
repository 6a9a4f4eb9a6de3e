"""Signed document model.

Documents are immutable pydantic models. A stored document never changes;
re-signing or editing produces a new value via ``model_copy``.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """One author's version of the record at one path.

    Attributes:
        path: Slash-delimited identifier, unique per (path, author) in a store.
        author: Author address, ``@<shortname>.<b32 pubkey>``.
        content: Text payload.
        content_hash: Multibase base32 sha256 of the utf-8 content.
        timestamp: Write time, microseconds since epoch.
        delete_after: Expiry time in microseconds, or None for a permanent document.
        signature: Author's base32 signature over the canonical form.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    author: str
    content: str = ""
    content_hash: str = ""
    timestamp: int = Field(ge=0)
    delete_after: int | None = None
    signature: str = ""

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"path must start with '/': {v!r}")
        return v

    @property
    def content_length(self) -> int:
        """Byte length of the utf-8 encoded content."""
        return len(self.content.encode("utf-8"))

    @property
    def is_ephemeral(self) -> bool:
        """True when the document carries a ``delete_after`` expiry time."""
        return self.delete_after is not None
