"""Ed25519 signature check for Discord interaction requests."""

from nacl.exceptions import CryptoError
from nacl.signing import VerifyKey


def _from_hex(value: str) -> bytes:
    """Decode hex strictly: two hex digits per byte, no whitespace or separators."""
    if not value.isascii() or not value.isalnum():
        raise ValueError("not a hex string")
    return bytes.fromhex(value)


def verify_signature(
    signature_hex: str | None,
    timestamp: str | None,
    raw_body: bytes,
    public_key_hex: str | None,
) -> bool:
    """Return True if ``signature_hex`` signs ``timestamp + raw_body`` under the key.

    Discord signs the timestamp header concatenated with the exact body bytes,
    so ``raw_body`` must be what came over the wire, not a re-serialized copy.

    Fails closed: any missing input, bad hex, wrong key/signature length or
    mismatch returns False instead of raising.
    """
    if not signature_hex or not timestamp or not public_key_hex:
        return False
    try:
        verify_key = VerifyKey(_from_hex(public_key_hex))
        message = timestamp.encode("utf-8") + raw_body
        verify_key.verify(message, _from_hex(signature_hex))
    except (CryptoError, ValueError):
        # bad hex, wrong key or signature length, or mismatch
        return False
    return True
