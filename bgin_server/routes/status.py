"""Status, provider probes and the static agent/session listings."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..dispatcher import ProbeResult, ProviderChainDispatcher, get_dispatcher
from ..logging_config import get_logger
from ..services.agents import AGENTS, BLOCK_SESSIONS
from ..utils.timestamps import utc_now_iso

logger = get_logger(__name__)

router = APIRouter(tags=["status"])

PREVIEW_CHARS = 100

_PROVIDER_LABELS = {
    "ollama": "Ollama Local Model",
    "openai": "OpenAI",
    "phala": "Phala Cloud",
}


def _preview(text: str) -> str:
    return text[:PREVIEW_CHARS] + "..."


def _probe_body(result: ProbeResult) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "llmAvailable": result.llm_available,
        "errors": result.errors,
    }
    if result.response is not None:
        body.update({
            "provider": _PROVIDER_LABELS.get(result.response.provider, result.response.provider),
            "model": result.response.model,
            "localModel": result.response.local_model,
            "confidentialCompute": result.response.confidential_compute,
            "response": _preview(result.response.content),
            "processingTime": result.response.processing_time,
        })
    return body


@router.get("/status")
async def get_status(
    settings: Settings = Depends(get_settings),
    dispatcher: ProviderChainDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    """Static capability flags for each configured provider; nothing is probed."""

    return {
        "status": "running",
        "providerOrder": dispatcher.provider_names,
        "ollamaConfigured": True,
        "ollamaEndpoint": settings.ollama_api_url,
        "ollamaModel": settings.ollama_model,
        "openaiConfigured": settings.openai_configured,
        "openaiModel": settings.openai_model,
        "phalaCloudConfigured": True,
        "phalaEndpoint": settings.phala_endpoint,
        "phalaModel": settings.phala_model,
        "discourseConfigured": settings.discourse_configured,
        "llmProvider": "Ollama Local Model (Primary)",
        "fallbackProvider": "OpenAI" if settings.openai_configured else "Phala Cloud",
        "finalFallback": "Static Responses",
        "timestamp": utc_now_iso(),
        "version": settings.app_version,
    }


@router.get("/test-llm")
async def test_llm(dispatcher: ProviderChainDispatcher = Depends(get_dispatcher)) -> Dict[str, Any]:
    """Walk the provider chain with a test message and report which provider answered."""

    result = await dispatcher.probe()
    body = _probe_body(result)
    if result.llm_available:
        body["status"] = "working"
        body["message"] = f"{body['provider']} integration is working correctly"
    else:
        body["status"] = "all_llm_failed"
        body["message"] = "All LLM services failed. Using static responses."
    return body


@router.get("/test-ollama")
async def test_ollama(
    settings: Settings = Depends(get_settings),
    dispatcher: ProviderChainDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    """Probe only the local model server."""

    result = await dispatcher.probe(only="ollama")
    body = _probe_body(result)
    if result.llm_available:
        body["status"] = "working"
        body["message"] = "Ollama integration is working correctly"
    else:
        body["status"] = "failed"
        body["message"] = "Ollama integration failed"
        body["error"] = result.errors.get("ollama")
        body["suggestion"] = f"Make sure Ollama is running on {settings.ollama_api_url}"
    return body


@router.get("/agents")
async def list_agents() -> Dict[str, Any]:
    return {"message": "BGIN Multi-Agent System", "agents": AGENTS}


@router.get("/sessions")
async def list_block_sessions() -> Dict[str, Any]:
    return {"message": "BGIN Block 13 Sessions", "sessions": BLOCK_SESSIONS}


__all__ = ["router"]
