"""Per-request errors raised while authenticating and routing interactions.

Each error maps to a plain-text HTTP response via the exception handlers
registered in ``gorkbot.app``. None of them is fatal to the process.
"""


class InteractionError(Exception):
    """Base class for errors raised while handling an inbound interaction."""

    status_code: int = 400
    public_message: str = "Bad Request"


class SignatureVerificationError(InteractionError):
    """The request is not signed by Discord (or cannot be checked).

    Missing headers, missing key, bad hex and signature mismatch all surface
    the same way so callers cannot tell which check failed.
    """

    status_code = 401
    public_message = "Unauthorized"


class MalformedPayloadError(InteractionError):
    """The verified body is not valid JSON."""

    public_message = "Invalid JSON body"


class UnrecognizedInteractionError(InteractionError):
    """No dispatch rule matches the interaction's type and data."""

    public_message = "Unknown interaction type"
