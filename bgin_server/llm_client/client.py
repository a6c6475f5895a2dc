"""HTTP client for chat-completion backends (Ollama and OpenAI-compatible APIs)."""

from typing import Any, Dict, List, Optional

import httpx

from ..logging_config import get_logger

logger = get_logger(__name__)


class LLMRequestError(Exception):
    """A chat-completion request failed or returned an unusable payload."""


def _build_client(timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout)


def _with_system(messages: List[Dict[str, Any]], system: Optional[str]) -> List[Dict[str, Any]]:
    if not system:
        return list(messages)
    return [{"role": "system", "content": system}] + list(messages)


async def _post_json(url: str, payload: Dict[str, Any], headers: Dict[str, str], timeout: float) -> Dict[str, Any]:
    async with _build_client(timeout) as client:
        try:
            response = await client.post(url, headers=headers, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:500]
            raise LLMRequestError(f"HTTP {e.response.status_code} from {url}: {body}") from e
        except httpx.HTTPError as e:
            raise LLMRequestError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise LLMRequestError(f"Failed to parse response from {url}: {e}") from e


async def request_chat_completion(
    url: str,
    model: str,
    messages: List[Dict[str, Any]],
    api_key: Optional[str] = None,
    system: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: float = 0.7,
    timeout: float = 60.0,
) -> Dict[str, Any]:
    """Make a request against an OpenAI-compatible /chat/completions endpoint."""

    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    payload: Dict[str, Any] = {
        "model": model,
        "messages": _with_system(messages, system),
        "temperature": temperature,
    }
    if max_tokens:
        payload["max_tokens"] = max_tokens

    logger.debug(f"Making chat completion request to {model} at {url}")
    result = await _post_json(url, payload, headers, timeout)
    logger.debug("Chat completion response received")
    return result


async def request_ollama_chat(
    base_url: str,
    model: str,
    messages: List[Dict[str, Any]],
    system: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: float = 0.7,
    top_p: float = 0.9,
    timeout: float = 60.0,
) -> Dict[str, Any]:
    """Make a non-streaming request to an Ollama server's /api/chat."""

    options: Dict[str, Any] = {"temperature": temperature, "top_p": top_p}
    if max_tokens:
        options["num_predict"] = max_tokens

    payload = {
        "model": model,
        "messages": _with_system(messages, system),
        "stream": False,
        "options": options,
    }

    url = f"{base_url.rstrip('/')}/api/chat"
    logger.debug(f"Making Ollama request to {model} at {url}")
    return await _post_json(url, payload, {"Content-Type": "application/json"}, timeout)


def extract_completion_text(result: Dict[str, Any]) -> str:
    """Pull the assistant text out of an OpenAI-style completion payload."""
    try:
        content = result["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise LLMRequestError(f"Malformed completion payload: missing {e}") from e
    if not isinstance(content, str) or not content.strip():
        raise LLMRequestError("Empty response from LLM")
    return content


def extract_ollama_text(result: Dict[str, Any]) -> str:
    """Pull the assistant text out of an Ollama /api/chat payload."""
    try:
        content = result["message"]["content"]
    except (KeyError, TypeError) as e:
        raise LLMRequestError(f"Malformed Ollama payload: missing {e}") from e
    if not isinstance(content, str) or not content.strip():
        raise LLMRequestError("Empty response from LLM")
    return content
