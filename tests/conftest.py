from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from adstudio.api.deps import get_script_writer, get_voice_synthesizer
from adstudio.main import app
from adstudio.services.elevenlabs_service import VoiceSynthesizer
from adstudio.services.script_service import ScriptWriter


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


class FakeTextToSpeech:
    def __init__(self, chunks=(), error=None, stream_error=None):
        self.chunks = list(chunks)
        self.error = error
        self.stream_error = stream_error
        self.calls = []

    def convert(self, voice_id, **kwargs):
        self.calls.append((voice_id, kwargs))
        if self.error is not None:
            raise self.error
        return self._stream()

    async def _stream(self):
        for chunk in self.chunks:
            yield chunk
        if self.stream_error is not None:
            raise self.stream_error


class FakeElevenLabs:
    def __init__(self, chunks=(), error=None, stream_error=None):
        self.text_to_speech = FakeTextToSpeech(chunks, error, stream_error)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_openai():
    def install(content=None, error=None):
        fake = FakeOpenAI(content=content, error=error)
        writer = ScriptWriter(fake, "test-model")
        app.dependency_overrides[get_script_writer] = lambda: writer
        return fake.completions
    return install


@pytest.fixture
def use_elevenlabs():
    def install(chunks=(), error=None, stream_error=None):
        fake = FakeElevenLabs(chunks, error, stream_error)
        synthesizer = VoiceSynthesizer(fake)
        app.dependency_overrides[get_voice_synthesizer] = lambda: synthesizer
        return fake.text_to_speech
    return install
