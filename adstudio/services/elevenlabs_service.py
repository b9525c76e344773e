import logging
from typing import AsyncIterator, Optional

from elevenlabs import VoiceSettings
from elevenlabs.client import AsyncElevenLabs

from adstudio.core.config import Settings

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Fixed voice configuration
VOICE_ID = "AtX6p0vItOfWBULsG7XF"
MODEL_ID = "eleven_v3"
OUTPUT_FORMAT = "mp3_44100_128"            # MP3 at 44.1 kHz/128 kbps
STABILITY = 0.5
SIMILARITY_BOOST = 0.75
# -------------------------------------------------------------------


class VoiceSynthesisError(Exception):
    pass


def create_elevenlabs_client(settings: Settings) -> Optional[AsyncElevenLabs]:
    if not settings.ELEVENLABS_API_KEY:
        logger.warning("ELEVENLABS_API_KEY not set, /tts requests will fail")
        return None
    return AsyncElevenLabs(api_key=settings.ELEVENLABS_API_KEY, timeout=settings.ELEVENLABS_TIMEOUT)


class VoiceSynthesizer:
    def __init__(self, client: Optional[AsyncElevenLabs]):
        self.client = client

    def stream(self, text: str) -> AsyncIterator[bytes]:
        """
        Starts synthesis and returns the audio chunks as the API sends them.
        """
        if self.client is None:
            raise VoiceSynthesisError("text-to-speech client not configured")

        logger.info(f"Generating audio with: Model={MODEL_ID}, Voice={VOICE_ID}")
        return self.client.text_to_speech.convert(
            VOICE_ID,
            text=text,
            model_id=MODEL_ID,
            output_format=OUTPUT_FORMAT,
            voice_settings=VoiceSettings(
                stability=STABILITY,
                similarity_boost=SIMILARITY_BOOST
            )
        )

    async def synthesize(self, text: str) -> bytes:
        """
        Converts text to MP3 audio, reading the whole stream before returning.
        """
        chunks = []
        async for chunk in self.stream(text):
            chunks.append(chunk)

        audio = b"".join(chunks)
        logger.info(f"Audio generated: {len(chunks)} chunks, {len(audio)} bytes")
        return audio
