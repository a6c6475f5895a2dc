"""Provider chain dispatcher - tries each backend once, in order, then falls back to canned text."""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence

from .prompts import MULTI_AGENT_LABEL, fallback_label, fallback_text, system_prompt_for
from .providers import ProviderError, ProviderResponse, build_default_providers
from ..config import get_settings
from ..logging_config import get_logger

logger = get_logger(__name__)

FALLBACK_CONFIDENCE = 0.6
FALLBACK_PROCESSING_TIME = 50
FALLBACK_MODEL = "fallback"

PROBE_MESSAGE = "Hello, this is a test message"


@dataclass(frozen=True)
class ChatRequest:
    """One inbound chat turn."""

    message: str
    agent: str
    session: str
    multi_agent: bool = False


@dataclass
class ProbeResult:
    """Outcome of a provider health probe."""

    response: Optional[ProviderResponse] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def llm_available(self) -> bool:
        return self.response is not None


def fallback_response(message: str, agent_label: str, session_label: str, multi_agent: bool = False) -> ProviderResponse:
    """Deterministic canned reply used once every provider has failed."""

    return ProviderResponse(
        content=fallback_text(message, agent_label, session_label, multi_agent),
        confidence=FALLBACK_CONFIDENCE,
        sources=0,
        processing_time=FALLBACK_PROCESSING_TIME,
        llm_used=False,
        model=FALLBACK_MODEL,
        provider=FALLBACK_MODEL,
    )


class ProviderChainDispatcher:
    """Sweeps an ordered provider list once per request; the first success wins."""

    def __init__(self, providers: Sequence[Any]):
        self.providers = list(providers)

    @property
    def provider_names(self) -> List[str]:
        return [provider.name for provider in self.providers]

    async def dispatch(self, request: ChatRequest) -> ProviderResponse:
        """Return the first provider reply, or the canned fallback when all providers fail."""

        label = MULTI_AGENT_LABEL if request.multi_agent else request.agent
        system_prompt = system_prompt_for(label, request.session)

        logger.info(f"🤖 Processing {label} request for {request.session} session")

        for provider in self.providers:
            try:
                response = await provider.generate(system_prompt, request.message)
            except ProviderError as e:
                logger.warning(f"⚠️ {provider.name} failed, trying next provider: {e.reason}")
                continue
            logger.info(f"✅ {provider.name} response generated using {response.model}")
            return response

        logger.warning(
            f"⚠️ All LLM providers failed, using {fallback_label(request.agent, request.multi_agent)} fallback"
        )
        return fallback_response(request.message, request.agent, request.session, request.multi_agent)

    async def probe(self, only: Optional[str] = None) -> ProbeResult:
        """Send a test message through one provider, or the chain without the canned fallback."""

        providers = [p for p in self.providers if p.name == only] if only else self.providers
        system_prompt = system_prompt_for("archive", "test")
        result = ProbeResult()
        if not providers:
            result.errors[only or "chain"] = "provider not configured"

        for provider in providers:
            try:
                result.response = await provider.generate(system_prompt, PROBE_MESSAGE)
                return result
            except ProviderError as e:
                logger.warning(f"Probe of {provider.name} failed: {e.reason}")
                result.errors[provider.name] = e.reason

        return result


@lru_cache(maxsize=1)
def get_dispatcher() -> ProviderChainDispatcher:
    """Get the process-wide dispatcher built from the cached settings."""
    return ProviderChainDispatcher(build_default_providers(get_settings()))
