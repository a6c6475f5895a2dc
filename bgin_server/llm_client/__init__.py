"""Chat-completion HTTP client."""

from .client import (
    LLMRequestError,
    extract_completion_text,
    extract_ollama_text,
    request_chat_completion,
    request_ollama_chat,
)

__all__ = [
    "LLMRequestError",
    "extract_completion_text",
    "extract_ollama_text",
    "request_chat_completion",
    "request_ollama_chat",
]
