"""Exception hierarchy for Signed Store.

All exceptions inherit from SignedStoreError, providing a consistent error
handling interface. Signature verification is not an error condition and
never raises; it returns ``False`` instead.
"""


class SignedStoreError(Exception):
    """Base exception for all Signed Store errors."""


class ValidationError(SignedStoreError):
    """Raised when input to a constructive operation is malformed.

    Covers invalid author shortnames, invalid keypairs, malformed queries
    and unsupported ``history`` values.
    """


class DecodeError(ValidationError):
    """Raised when multibase base32 text cannot be decoded."""


class StoreClosedError(ValidationError):
    """Raised when any operation is attempted on a closed document store."""
