"""Discord request signature verification as a FastAPI dependency."""

import logging

from fastapi import Request

from gorkbot.config import get_settings
from gorkbot.discord.signature import verify_signature
from gorkbot.errors import SignatureVerificationError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


async def verify_discord_request(request: Request) -> bytes:
    """Verify the Discord request signature and return the raw body.

    Reads the raw body FIRST (before any JSON parsing) so the signature is
    checked against the exact bytes Discord signed.

    Raises SignatureVerificationError if the request cannot be authenticated.
    """
    settings = get_settings()
    body = await request.body()

    signature = request.headers.get(SIGNATURE_HEADER, "")
    timestamp = request.headers.get(TIMESTAMP_HEADER, "")

    if not verify_signature(signature, timestamp, body, settings.discord_public_key):
        logger.warning(
            "Rejected interaction request from %s",
            request.client.host if request.client else "unknown",
        )
        raise SignatureVerificationError()

    return body
