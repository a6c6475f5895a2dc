"""Provider adapters: one per text-generation backend, each normalizing into ProviderResponse."""

import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List

from ..config import Settings
from ..llm_client import (
    LLMRequestError,
    extract_completion_text,
    extract_ollama_text,
    request_chat_completion,
    request_ollama_chat,
)

# Per-provider confidence; these are display values, not model scores
LOCAL_MODEL_CONFIDENCE = 0.85
OPENAI_CONFIDENCE = 0.9
CONFIDENTIAL_COMPUTE_CONFIDENCE = 0.95


class ProviderError(Exception):
    """Any failure of a single provider attempt."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.reason = message


@dataclass(frozen=True)
class ProviderResponse:
    """Normalized result of one successful provider attempt (or the canned fallback)."""

    content: str
    confidence: float
    sources: int
    processing_time: int
    llm_used: bool
    model: str
    provider: str
    local_model: bool = False
    confidential_compute: bool = False


def decorative_source_count() -> int:
    """Random 2..6 shown in the UI as a source count; not backed by real retrieval."""
    return random.randint(2, 6)


def _elapsed_ms(started: float) -> int:
    return max(0, int(round((time.perf_counter() - started) * 1000)))


def _user_messages(message: str) -> List[Dict[str, Any]]:
    return [{"role": "user", "content": message}]


class LocalModelProvider:
    """Ollama server running next to the hub."""

    name = "ollama"

    def __init__(self, settings: Settings):
        self.base_url = settings.ollama_api_url
        self.model = settings.ollama_model
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self.timeout = settings.llm_timeout_seconds

    async def generate(self, system_prompt: str, message: str) -> ProviderResponse:
        started = time.perf_counter()
        try:
            result = await request_ollama_chat(
                base_url=self.base_url,
                model=self.model,
                messages=_user_messages(message),
                system=system_prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                timeout=self.timeout,
            )
            content = extract_ollama_text(result)
        except LLMRequestError as e:
            raise ProviderError(self.name, str(e)) from e

        eval_duration = result.get("eval_duration")
        if isinstance(eval_duration, (int, float)) and eval_duration > 0:
            processing_time = int(round(eval_duration / 1_000_000))
        else:
            processing_time = _elapsed_ms(started)

        return ProviderResponse(
            content=content,
            confidence=LOCAL_MODEL_CONFIDENCE,
            sources=decorative_source_count(),
            processing_time=processing_time,
            llm_used=True,
            model=self.model,
            provider=self.name,
            local_model=True,
        )


class _CompletionsProvider:
    """Shared call path for OpenAI-compatible /chat/completions backends."""

    name = ""
    confidence = 0.0
    confidential_compute = False

    url: str
    model: str
    api_key: Any

    def __init__(self, settings: Settings):
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self.timeout = settings.llm_timeout_seconds

    def _check_configured(self) -> None:
        """Hook for subclasses that refuse to call out without credentials."""

    async def generate(self, system_prompt: str, message: str) -> ProviderResponse:
        self._check_configured()
        started = time.perf_counter()
        try:
            result = await request_chat_completion(
                url=self.url,
                model=self.model,
                messages=_user_messages(message),
                api_key=self.api_key,
                system=system_prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                timeout=self.timeout,
            )
            content = extract_completion_text(result)
        except LLMRequestError as e:
            raise ProviderError(self.name, str(e)) from e

        return ProviderResponse(
            content=content,
            confidence=self.confidence,
            sources=decorative_source_count(),
            processing_time=_elapsed_ms(started),
            llm_used=True,
            model=self.model,
            provider=self.name,
            confidential_compute=self.confidential_compute,
        )


class OpenAIProvider(_CompletionsProvider):
    """OpenAI chat completions; skipped (as a failure) when no key is configured."""

    name = "openai"
    confidence = OPENAI_CONFIDENCE

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.url = settings.openai_api_url
        self.model = settings.openai_model
        self.api_key = settings.openai_api_key

    def _check_configured(self) -> None:
        if not self.api_key:
            raise ProviderError(self.name, "OpenAI API key not configured")


class ConfidentialComputeProvider(_CompletionsProvider):
    """Phala Cloud TEE endpoint exposing an OpenAI-compatible API."""

    name = "phala"
    confidence = CONFIDENTIAL_COMPUTE_CONFIDENCE
    confidential_compute = True

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.url = f"{settings.phala_endpoint.rstrip('/')}/v1/chat/completions"
        self.model = settings.phala_model
        self.api_key = settings.phala_api_key


def build_default_providers(settings: Settings) -> List[Any]:
    """Providers in priority order: local model, OpenAI, then Phala Cloud."""
    return [
        LocalModelProvider(settings),
        OpenAIProvider(settings),
        ConfidentialComputeProvider(settings),
    ]
