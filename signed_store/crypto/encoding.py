"""Multibase base32 codec and key encodings.

Binary values (public keys, secrets, signatures, hashes) are represented as
lowercase RFC4648 base32 without padding, prefixed with the multibase tag
``b``. Decoding is strict: only the canonical encoding of a byte string is
accepted, so every buffer has exactly one textual form.
"""

import re
from base64 import b32decode, b32encode
from binascii import Error as BinasciiError
from collections.abc import Mapping
from typing import Any

from signed_store.crypto._types import AuthorKeypair, KeypairBytes
from signed_store.exceptions import DecodeError, ValidationError

MULTIBASE_BASE32_TAG = "b"
BASE32_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz234567")

ED25519_KEY_LENGTH = 32

SHORTNAME_LENGTH = 4

# Residues of len(body) % 8 that cannot come from whole bytes
_IMPOSSIBLE_LENGTHS = frozenset({1, 3, 6})

_AUTHOR_ADDRESS_PATTERN = re.compile(r"^@([^.]*)\.(.*)$", re.DOTALL)


def encode_base32(data: bytes) -> str:
    """Encode bytes as tagged lowercase base32 with no padding.

    >>> encode_base32(b"")
    'b'
    >>> encode_base32(b"\\x00")
    'baa'
    """
    body = b32encode(bytes(data)).decode("ascii").rstrip("=").lower()
    return MULTIBASE_BASE32_TAG + body


def decode_base32(text: str) -> bytes:
    """Decode tagged lowercase base32 text.

    Raises:
        DecodeError: If the text is empty, untagged, contains characters
            outside ``[a-z2-7]`` (uppercase and whitespace included), has an
            impossible length, or carries non-zero padding bits.
    """
    if not isinstance(text, str):
        raise DecodeError(f"can't decode base32 from {type(text).__name__}")
    if not text:
        raise DecodeError("can't decode base32 from empty string")
    if text[0] != MULTIBASE_BASE32_TAG:
        raise DecodeError(f"base32 string must start with {MULTIBASE_BASE32_TAG!r}, got {text[0]!r}")

    body = text[1:]
    bad = sorted({ch for ch in body if ch not in BASE32_ALPHABET})
    if bad:
        raise DecodeError(f"invalid base32 characters: {''.join(bad)!r}")
    if len(body) % 8 in _IMPOSSIBLE_LENGTHS:
        raise DecodeError(f"invalid base32 length: {len(body)}")

    padding = "=" * (-len(body) % 8)
    try:
        data = b32decode(body.upper() + padding)
    except BinasciiError as e:
        raise DecodeError(f"invalid base32 string: {e}") from e

    # b32decode silently drops non-zero trailing bits
    if encode_base32(data) != text:
        raise DecodeError("base32 string is not in canonical form (non-zero trailing bits)")
    return data


def encode_pubkey(pubkey: bytes) -> str:
    return encode_base32(pubkey)


def decode_pubkey(text: str) -> bytes:
    return decode_base32(text)


def encode_secret(secret: bytes) -> str:
    return encode_base32(secret)


def decode_secret(text: str) -> bytes:
    return decode_base32(text)


def encode_sig(sig: bytes) -> str:
    return encode_base32(sig)


def decode_sig(text: str) -> bytes:
    return decode_base32(text)


def check_shortname_is_valid(shortname: str) -> None:
    """Validate an author shortname: exactly 4 lowercase ASCII letters.

    Raises:
        ValidationError: With a reason specific to the length, case or
            character-set problem.
    """
    if not isinstance(shortname, str):
        raise ValidationError(f"author shortname must be a string, got {type(shortname).__name__}")
    if len(shortname) != SHORTNAME_LENGTH:
        raise ValidationError(
            f"author shortname must be exactly {SHORTNAME_LENGTH} characters long, got {len(shortname)}: {shortname!r}"
        )
    if any("A" <= ch <= "Z" for ch in shortname):
        raise ValidationError(f"author shortname must be lowercase: {shortname!r}")
    if not all("a" <= ch <= "z" for ch in shortname):
        raise ValidationError(f"author shortname may only contain letters a-z: {shortname!r}")


def parse_author_address(address: str) -> tuple[str, str]:
    """Split ``@<shortname>.<b32 pubkey>`` into its shortname and pubkey text.

    Only the shape is checked here; the pubkey text is not decoded.

    Raises:
        ValidationError: If the address is not a string or lacks the
            ``@`` prefix or ``.`` separator, or the shortname is invalid.
    """
    if not isinstance(address, str):
        raise ValidationError(f"author address must be a string, got {type(address).__name__}")
    if not address:
        raise ValidationError("author address is empty")
    match = _AUTHOR_ADDRESS_PATTERN.match(address)
    if match is None:
        raise ValidationError(f"author address must look like '@abcd.b...': {address!r}")
    shortname, pubkey_b32 = match.groups()
    check_shortname_is_valid(shortname)
    return shortname, pubkey_b32


def encode_author_keypair(shortname: str, keypair_bytes: KeypairBytes) -> AuthorKeypair:
    """Build a textual AuthorKeypair from raw key material."""
    check_shortname_is_valid(shortname)
    return AuthorKeypair(
        address=f"@{shortname}.{encode_pubkey(keypair_bytes.pubkey)}",
        secret=encode_secret(keypair_bytes.secret),
    )


def _keypair_fields(keypair: AuthorKeypair | Mapping[str, Any]) -> tuple[Any, Any]:
    if isinstance(keypair, AuthorKeypair):
        return keypair.address, keypair.secret
    if isinstance(keypair, Mapping):
        return keypair.get("address"), keypair.get("secret")
    return getattr(keypair, "address", None), getattr(keypair, "secret", None)


def decode_author_keypair(keypair: AuthorKeypair | Mapping[str, Any]) -> KeypairBytes:
    """Decode an AuthorKeypair into raw key bytes, checking lengths.

    This does not check that the two keys belong together; see
    ``check_author_keypair_is_valid`` for that.

    Raises:
        ValidationError: If a field is missing, empty, undecodable or has the
            wrong length for an Ed25519 key. ``DecodeError`` is raised for
            base32 problems.
    """
    address, secret = _keypair_fields(keypair)
    if address is None:
        raise ValidationError("keypair is missing its address")
    if secret is None:
        raise ValidationError("keypair is missing its secret")
    if not isinstance(secret, str) or not secret:
        raise ValidationError("keypair secret is empty")

    _, pubkey_b32 = parse_author_address(address)
    pubkey = decode_pubkey(pubkey_b32)
    if len(pubkey) != ED25519_KEY_LENGTH:
        raise ValidationError(f"pubkey must be {ED25519_KEY_LENGTH} bytes long, got {len(pubkey)}")

    secret_bytes = decode_secret(secret)
    if len(secret_bytes) != ED25519_KEY_LENGTH:
        raise ValidationError(f"secret must be {ED25519_KEY_LENGTH} bytes long, got {len(secret_bytes)}")

    return KeypairBytes(pubkey=pubkey, secret=secret_bytes)
