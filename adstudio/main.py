import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from adstudio.api import script, voice
from adstudio.core.config import get_settings
from adstudio.services.elevenlabs_service import VoiceSynthesizer, create_elevenlabs_client
from adstudio.services.script_service import ScriptWriter, create_openai_client

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Outbound clients are built once and shared by every request
    app.state.script_writer = ScriptWriter(create_openai_client(settings), settings.OPENAI_MODEL)
    app.state.voice_synthesizer = VoiceSynthesizer(create_elevenlabs_client(settings))
    logger.info("Ad studio clients initialized")
    yield


app = FastAPI(title="Radio Ad Studio", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(PUBLIC_DIR / "index.html", media_type="text/html")


app.include_router(script.router, tags=["Script"])
app.include_router(voice.router, tags=["Voice"])

# Must stay last: the mount at "/" would shadow routes registered after it
app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")


if __name__ == "__main__":
    logger.info(f"Server running at http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
