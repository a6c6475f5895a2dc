"""Provider chain dispatch for agent chat replies."""

from .prompts import fallback_text, system_prompt_for
from .providers import (
    ConfidentialComputeProvider,
    LocalModelProvider,
    OpenAIProvider,
    ProviderError,
    ProviderResponse,
    build_default_providers,
)
from .runtime import ChatRequest, ProbeResult, ProviderChainDispatcher, fallback_response, get_dispatcher

__all__ = [
    "ChatRequest",
    "ConfidentialComputeProvider",
    "LocalModelProvider",
    "OpenAIProvider",
    "ProbeResult",
    "ProviderChainDispatcher",
    "ProviderError",
    "ProviderResponse",
    "build_default_providers",
    "fallback_response",
    "fallback_text",
    "get_dispatcher",
    "system_prompt_for",
]
