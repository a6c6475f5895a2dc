"""Discourse publishing routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..logging_config import get_logger
from ..models.chat import PublishBody, ReplyBody, missing_fields
from ..services.discourse import DiscourseClient, DiscourseError, attribution_footer, get_discourse_client
from ..utils.responses import failure_response, missing_fields_response

logger = get_logger(__name__)

router = APIRouter(prefix="/discourse", tags=["discourse"])


@router.get("/categories")
async def get_categories(client: DiscourseClient = Depends(get_discourse_client)) -> Dict[str, Any]:
    """Forum categories; failures are reported in the body rather than as an HTTP error."""

    try:
        categories = await client.get_categories()
    except DiscourseError as e:
        return {"success": False, "error": str(e)}
    return {"success": True, "categories": categories}


@router.post("/publish")
async def publish_insight(body: PublishBody, client: DiscourseClient = Depends(get_discourse_client)):
    """Publish an agent insight as a new forum topic."""

    missing = missing_fields(body, "title", "content")
    if missing:
        return missing_fields_response(missing)

    raw = attribution_footer(body.content, "insight", body.agent_type, body.session_id, body.project_id)
    try:
        result = await client.create_topic(body.title, raw, body.category_id, body.tags)
    except DiscourseError as e:
        logger.error(f"Error publishing to Discourse: {e}")
        return failure_response("Failed to publish to Discourse", e)

    return {"success": True, "message": "Insight published to Discourse successfully", **result}


@router.post("/reply")
async def reply_to_topic(body: ReplyBody, client: DiscourseClient = Depends(get_discourse_client)):
    """Post an agent response as a reply in an existing topic."""

    missing = missing_fields(body, "topic_id", "content")
    if missing:
        return missing_fields_response(missing)

    raw = attribution_footer(body.content, "response", body.agent_type, body.session_id, body.project_id)
    try:
        result = await client.reply_to_topic(body.topic_id, raw)
    except DiscourseError as e:
        logger.error(f"Error replying to Discourse: {e}")
        return failure_response("Failed to reply to Discourse", e)

    return {"success": True, "message": "Reply published to Discourse successfully", **result}


@router.get("/status")
async def discourse_status(client: DiscourseClient = Depends(get_discourse_client)) -> Dict[str, Any]:
    return {
        "discourseConfigured": client.configured,
        "discourseUrl": client.base_url,
        "discourseUsername": client.username,
        "status": "Ready" if client.configured else "Not Configured",
        "message": (
            "Discourse integration is ready"
            if client.configured
            else "Please configure DISCOURSE_API_KEY in your .env file"
        ),
    }


__all__ = ["router"]
