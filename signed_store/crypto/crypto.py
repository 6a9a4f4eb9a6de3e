"""Author identities, signatures and content hashes.

Ed25519 keys via ``cryptography``. Ed25519 signatures are deterministic, so
the same keypair and input always produce the same signature text.
"""

import hashlib
from collections.abc import Mapping
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from signed_store.crypto._types import AuthorKeypair, KeypairBytes
from signed_store.crypto.encoding import (
    check_shortname_is_valid,
    decode_author_keypair,
    decode_pubkey,
    decode_sig,
    encode_author_keypair,
    encode_base32,
    encode_sig,
    parse_author_address,
)
from signed_store.exceptions import ValidationError
from signed_store.logging import get_store_logger

logger = get_store_logger(__name__)

_RAW = serialization.Encoding.Raw


def _to_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _raw_pubkey(private_key: Ed25519PrivateKey) -> bytes:
    return private_key.public_key().public_bytes(_RAW, serialization.PublicFormat.Raw)


def sha256_base32(data: str | bytes) -> str:
    """Compute SHA256 of text (utf-8) or bytes, multibase base32 encoded.

    >>> sha256_base32("")
    'b4oymiquy7qobjgx36tejs35zeqt24qpemsnzgtfeswmrw6csxbkq'
    """
    return encode_base32(hashlib.sha256(_to_bytes(data)).digest())


def generate_author_keypair(shortname: str) -> AuthorKeypair:
    """Generate a fresh author identity.

    Args:
        shortname: Exactly 4 lowercase ASCII letters.

    Returns:
        AuthorKeypair with ``address = "@<shortname>.<b32 pubkey>"``.

    Raises:
        ValidationError: If the shortname is invalid.
    """
    check_shortname_is_valid(shortname)
    private_key = Ed25519PrivateKey.generate()
    secret = private_key.private_bytes(_RAW, serialization.PrivateFormat.Raw, serialization.NoEncryption())
    keypair = encode_author_keypair(shortname, KeypairBytes(pubkey=_raw_pubkey(private_key), secret=secret))
    logger.debug("Generated author keypair for %s", keypair.address)
    return keypair


def _private_key_for(keypair: AuthorKeypair | Mapping[str, Any]) -> Ed25519PrivateKey:
    keypair_bytes = decode_author_keypair(keypair)
    private_key = Ed25519PrivateKey.from_private_bytes(keypair_bytes.secret)
    if _raw_pubkey(private_key) != keypair_bytes.pubkey:
        raise ValidationError("keypair secret does not match the pubkey in its address")
    return private_key


def check_author_keypair_is_valid(keypair: AuthorKeypair | Mapping[str, Any]) -> bool:
    """Check that a keypair is well formed and its two halves belong together.

    Returns:
        True when the keypair is valid.

    Raises:
        ValidationError: Naming the first problem found (missing or empty
            field, bad encoding, wrong key length, or mismatched keys).
    """
    _private_key_for(keypair)
    return True


def sign(keypair: AuthorKeypair | Mapping[str, Any], data: str | bytes) -> str:
    """Sign text (utf-8) or bytes with the keypair's secret.

    Raises:
        ValidationError: If the keypair cannot be decoded or its secret does
            not match the pubkey in its address.
    """
    private_key = _private_key_for(keypair)
    return encode_sig(private_key.sign(_to_bytes(data)))


def verify(address: str, signature: str, data: str | bytes) -> bool:
    """Check that ``signature`` was made by ``address`` over ``data``.

    Never raises: malformed addresses, malformed signatures and wrong
    signatures all return False.
    """
    try:
        _, pubkey_b32 = parse_author_address(address)
        public_key = Ed25519PublicKey.from_public_bytes(decode_pubkey(pubkey_b32))
        public_key.verify(decode_sig(signature), _to_bytes(data))
    except (ValidationError, InvalidSignature, ValueError, TypeError):
        return False
    return True
