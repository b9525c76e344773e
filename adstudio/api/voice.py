import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from adstudio.api.deps import get_voice_synthesizer
from adstudio.schemas.voice import ErrorResponse, VoiceRequest
from adstudio.services.elevenlabs_service import VoiceSynthesizer

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/tts",
    response_class=Response,
    responses={
        200: {"content": {"audio/mpeg": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def text_to_speech(
    request: Optional[VoiceRequest] = None,
    synthesizer: VoiceSynthesizer = Depends(get_voice_synthesizer)
):
    """
    Converts text to MP3 audio using ElevenLabs
    """
    text = request.text if request else None
    if not text or not text.strip():
        logger.info("Rejected /tts request without text")
        return error_response("Text is required", status.HTTP_400_BAD_REQUEST)

    try:
        audio = await synthesizer.synthesize(text)
    except Exception:
        logger.exception("ElevenLabs error")
        return error_response("Voice generation failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Length": str(len(audio))}
    )
