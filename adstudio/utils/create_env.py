"""
Writes a starter .env file for the ad studio server.
Copy the result and replace the placeholder keys with real credentials.
"""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

ENV_TEMPLATE = """
# OpenAI Configuration (script generation)
OPENAI_API_KEY=your_openai_api_key
OPENAI_MODEL=gpt-4o-mini
OPENAI_TIMEOUT=30

# ElevenLabs Configuration (text-to-speech)
ELEVENLABS_API_KEY=your_elevenlabs_api_key
ELEVENLABS_TIMEOUT=60

# Server
HOST=0.0.0.0
PORT=3000
LOG_LEVEL=INFO
CORS_ORIGINS=["*"]
"""

# Project root is two levels above this file's directory
DEFAULT_ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


def create_env_file(path: Union[str, Path] = DEFAULT_ENV_PATH, overwrite: bool = False) -> Path:
    """Create a .env file with template values. Returns the written path."""
    env_path = Path(path)
    if env_path.exists() and not overwrite:
        raise FileExistsError(f".env file already exists at {env_path}")

    env_path.write_text(ENV_TEMPLATE.strip() + "\n", encoding="utf-8")
    logger.info(f".env file created at {env_path}")
    return env_path


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    create_env_file()
