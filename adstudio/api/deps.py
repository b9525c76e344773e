from fastapi import Request

from adstudio.services.elevenlabs_service import VoiceSynthesizer
from adstudio.services.script_service import ScriptWriter


def get_script_writer(request: Request) -> ScriptWriter:
    return request.app.state.script_writer


def get_voice_synthesizer(request: Request) -> VoiceSynthesizer:
    return request.app.state.voice_synthesizer
