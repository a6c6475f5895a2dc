"""Discourse forum client for publishing agent insights."""

from typing import Any, Dict, List, Optional

import httpx

from ...config import Settings, get_settings
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PROJECT_ID = "bgin-conference-2025"


class DiscourseError(Exception):
    """Discourse is unconfigured or rejected a request."""


def attribution_footer(
    content: str,
    kind: str,
    agent_type: Optional[str] = None,
    session_id: Optional[str] = None,
    project_id: Optional[str] = None,
) -> str:
    """Append the generated-by footer shown under published posts."""

    return (
        f"{content}\n\n---\n\n"
        f"*This {kind} was generated by the BGIN AI {agent_type or 'Archive'} Agent during the "
        f"{session_id or 'conference'} session. Published via the BGIN Multi-Agent System.*\n\n"
        f"*Project: {project_id or DEFAULT_PROJECT_ID}*"
    )


def _error_detail(response: httpx.Response) -> str:
    try:
        errors = response.json().get("errors")
    except (ValueError, AttributeError):
        errors = None
    if isinstance(errors, list) and errors:
        return ", ".join(str(e) for e in errors)
    return f"HTTP {response.status_code}"


class DiscourseClient:
    """Thin wrapper over the Discourse REST API (posts and categories)."""

    def __init__(self, settings: Settings):
        self.base_url = settings.discourse_url.rstrip("/")
        self.api_key = settings.discourse_api_key
        self.username = settings.discourse_username
        self.timeout = settings.llm_timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise DiscourseError("Discourse API key not configured")
        return {
            "Api-Key": self.api_key,
            "Api-Username": self.username,
            "Content-Type": "application/json",
        }

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)

    async def _request(self, method: str, path: str, action: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = self._headers()
        async with self._build_client() as client:
            try:
                response = await client.request(method, path, headers=headers, json=payload)
            except httpx.HTTPError as e:
                logger.error(f"Discourse API error: {e}")
                raise DiscourseError(f"Failed to {action}: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(f"Discourse API error: {detail}")
            raise DiscourseError(f"Failed to {action}: {detail}")

        try:
            return response.json()
        except ValueError as e:
            raise DiscourseError(f"Failed to {action}: invalid JSON response") from e

    async def create_topic(
        self,
        title: str,
        raw: str,
        category_id: Optional[int] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Create a new topic; returns post/topic ids and the topic URL."""

        data = await self._request("POST", "/posts.json", "create Discourse post", {
            "title": title,
            "raw": raw,
            "category": category_id,
            "tags": tags or [],
            "archetype": "regular",
        })
        logger.info(f"📝 Created Discourse topic {data.get('topic_id')}")
        return {
            "postId": data.get("id"),
            "topicId": data.get("topic_id"),
            "url": f"{self.base_url}/t/{data.get('topic_id')}",
            "title": data.get("title", title),
        }

    async def reply_to_topic(self, topic_id: int, raw: str) -> Dict[str, Any]:
        """Post a reply to an existing topic."""

        data = await self._request("POST", "/posts.json", "reply to Discourse topic", {
            "topic_id": topic_id,
            "raw": raw,
        })
        logger.info(f"📝 Replied to Discourse topic {data.get('topic_id')}")
        return {
            "postId": data.get("id"),
            "topicId": data.get("topic_id"),
            "url": f"{self.base_url}/t/{data.get('topic_id')}/{data.get('post_number')}",
        }

    async def get_categories(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/categories.json", "get categories")
        return data.get("category_list", {}).get("categories", [])


def get_discourse_client() -> DiscourseClient:
    """Build a client from the cached settings."""
    return DiscourseClient(get_settings())
