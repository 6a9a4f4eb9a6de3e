"""Domain types for the crypto layer."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class AuthorKeypair(BaseModel):
    """Textual author identity.

    ``address`` is ``@<shortname>.<b32 public key>``; ``secret`` is the b32
    encoded private key seed. The secret is never part of the address.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: str
    secret: str


class KeypairBytes(NamedTuple):
    """Raw Ed25519 key material decoded from an AuthorKeypair."""

    pubkey: bytes
    secret: bytes


__all__ = ["AuthorKeypair", "KeypairBytes"]
