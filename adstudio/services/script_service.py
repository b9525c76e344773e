import logging
from dataclasses import dataclass
from typing import Optional, Union

from openai import AsyncOpenAI

from adstudio.core.config import Settings
from adstudio.services.script_templates import build_prompt, fallback_script

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a copywriter who writes short, spoken radio advertisements."


@dataclass(frozen=True)
class Generated:
    text: str


@dataclass(frozen=True)
class Failed:
    cause: str


GenerationOutcome = Union[Generated, Failed]


def create_openai_client(settings: Settings) -> Optional[AsyncOpenAI]:
    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY not set, scripts will use the fallback template")
        return None
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.OPENAI_TIMEOUT)


class ScriptWriter:
    def __init__(self, client: Optional[AsyncOpenAI], model: str):
        self.client = client
        self.model = model

    async def attempt(self, prompt: str) -> GenerationOutcome:
        """
        Asks the model for a script. Never raises: any error, or a blank
        answer, comes back as Failed.
        """
        if self.client is None:
            return Failed("text generation client not configured")

        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt}
                ]
            )
            text = resp.choices[0].message.content
        except Exception as e:
            return Failed(f"{type(e).__name__}: {e}")

        if not text or not text.strip():
            return Failed("empty response from text generation model")
        return Generated(text.strip())

    async def write_script(self, business_name: str, service: str, target_audience: str) -> str:
        prompt = build_prompt(business_name, service, target_audience)
        outcome = await self.attempt(prompt)

        if isinstance(outcome, Generated):
            logger.info(f"Script generated for {business_name!r} with {self.model}")
            return outcome.text

        logger.warning(f"Script generation failed ({outcome.cause}), using structured fallback")
        return fallback_script(business_name, service, target_audience)
