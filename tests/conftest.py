"""Shared fixtures: isolated settings, a temp transcript store, and scripted providers."""

import itertools
from typing import List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from bgin_server.app import app
from bgin_server.config import Settings, get_settings
from bgin_server.dispatcher import ProviderChainDispatcher, ProviderError, ProviderResponse, get_dispatcher
from bgin_server.services.discourse import DiscourseClient, get_discourse_client
from bgin_server.services.transcripts import TranscriptStore, get_transcript_store


class ScriptedProvider:
    """Provider double that either fails or answers with fixed text, recording every call."""

    def __init__(self, name: str, reply: Optional[str] = None, model: str = "test-model"):
        self.name = name
        self.reply = reply
        self.model = model
        self.calls: List[tuple] = []

    async def generate(self, system_prompt: str, message: str) -> ProviderResponse:
        self.calls.append((system_prompt, message))
        if self.reply is None:
            raise ProviderError(self.name, "connection refused")
        return ProviderResponse(
            content=self.reply,
            confidence=0.9,
            sources=3,
            processing_time=12,
            llm_used=True,
            model=self.model,
            provider=self.name,
        )


def failing_chain() -> List[ScriptedProvider]:
    return [ScriptedProvider("ollama"), ScriptedProvider("openai"), ScriptedProvider("phala")]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        chat_storage_dir=tmp_path / "chat-storage",
        ollama_api_url="http://ollama.test:11434",
        ollama_model="llama-test",
        openai_api_key="sk-test",
        openai_api_url="https://openai.test/v1/chat/completions",
        openai_model="gpt-test",
        phala_endpoint="https://phala.test/",
        phala_api_key="phala-test",
        phala_model="phala-model",
        discourse_url="https://forum.test",
        discourse_api_key=None,
        discourse_username="bot",
    )


@pytest.fixture
def store(settings) -> TranscriptStore:
    ticks = itertools.count(1_760_000_000_000)
    return TranscriptStore(settings.chat_storage_dir, clock=lambda: next(ticks))


@pytest.fixture
def providers() -> List[ScriptedProvider]:
    return failing_chain()


@pytest.fixture
def client(settings, store, providers):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_transcript_store] = lambda: store
    app.dependency_overrides[get_dispatcher] = lambda: ProviderChainDispatcher(providers)
    app.dependency_overrides[get_discourse_client] = lambda: DiscourseClient(settings)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def mock_llm_http(monkeypatch):
    """Route the LLM client's HTTP traffic to a handler; returns a setter for the handler."""

    def install(handler):
        def build(timeout):
            return httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=timeout)

        monkeypatch.setattr("bgin_server.llm_client.client._build_client", build)

    return install
