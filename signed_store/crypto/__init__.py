"""Author identities, signatures, content hashes and the base32 codec."""

from ._types import AuthorKeypair, KeypairBytes
from .crypto import check_author_keypair_is_valid, generate_author_keypair, sha256_base32, sign, verify
from .encoding import (
    decode_author_keypair,
    decode_base32,
    encode_author_keypair,
    encode_base32,
    parse_author_address,
)

__all__ = [
    "AuthorKeypair",
    "KeypairBytes",
    "check_author_keypair_is_valid",
    "decode_author_keypair",
    "decode_base32",
    "encode_author_keypair",
    "encode_base32",
    "generate_author_keypair",
    "parse_author_address",
    "sha256_base32",
    "sign",
    "verify",
]
