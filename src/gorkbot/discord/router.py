"""Discord interactions webhook router with signature verification."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gorkbot.discord.dispatcher import dispatch
from gorkbot.discord.verification import verify_discord_request
from gorkbot.models.interactions import decode_interaction

router = APIRouter(prefix="", tags=["discord"])


@router.post("/interactions")
async def interactions(body: bytes = Depends(verify_discord_request)) -> JSONResponse:
    """Receive Discord interactions.

    The body has already been authenticated by the dependency; decoding and
    dispatch errors propagate to the app's exception handlers (400).
    """
    interaction = decode_interaction(body)
    response = dispatch(interaction)
    return JSONResponse(response.to_payload())
