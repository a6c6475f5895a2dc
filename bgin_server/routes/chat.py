"""Chat routes: agent replies and transcript persistence."""

from fastapi import APIRouter, Depends

from ..dispatcher import ChatRequest, ProviderChainDispatcher, get_dispatcher
from ..logging_config import get_logger
from ..models.chat import (
    ChatBody,
    ChatListReply,
    ChatReply,
    ChatSummary,
    DeleteChatReply,
    LoadChatReply,
    SaveChatBody,
    SaveChatReply,
    missing_fields,
)
from ..services.transcripts import (
    InvalidTranscriptNameError,
    MissingFieldsError,
    TranscriptNotFoundError,
    TranscriptStore,
    TranscriptStoreError,
    get_transcript_store,
)
from ..utils.responses import error_response, failure_response, missing_fields_response
from ..utils.timestamps import utc_now_iso

logger = get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatReply)
async def chat(body: ChatBody, dispatcher: ProviderChainDispatcher = Depends(get_dispatcher)):
    """Answer a message as one agent (or all of them), falling back to canned text when no LLM is reachable."""

    missing = missing_fields(body, "message", "agent", "session")
    if missing:
        return missing_fields_response(missing)

    request = ChatRequest(
        message=body.message,
        agent=body.agent,
        session=body.session,
        multi_agent=body.multi_agent,
    )
    try:
        response = await dispatcher.dispatch(request)
    except Exception as e:
        logger.error(f"Chat endpoint error: {e}")
        return failure_response("Failed to process chat request", e)

    return ChatReply(
        content=response.content,
        agent=request.agent,
        session=request.session,
        timestamp=utc_now_iso(),
        confidence=response.confidence,
        sources=response.sources,
        processing_time=response.processing_time,
        llm_used=response.llm_used,
        model=response.model,
        multi_agent=request.multi_agent,
    )


@router.post("/save", response_model=SaveChatReply)
async def save_chat(body: SaveChatBody, store: TranscriptStore = Depends(get_transcript_store)):
    """Persist a snapshot of a conversation."""

    try:
        result = store.save(body.project_id, body.session_id, body.messages, body.metadata)
    except MissingFieldsError as e:
        return missing_fields_response(e.missing)
    except InvalidTranscriptNameError as e:
        return error_response(str(e), filename=e.filename)
    except TranscriptStoreError as e:
        logger.error(f"Error saving chat: {e}")
        return failure_response("Failed to save chat", e)

    return SaveChatReply(
        filename=result.filename,
        project_id=result.project_id,
        session_id=result.session_id,
        message_count=result.message_count,
    )


@router.get("/load/{project_id}/{session_id}", response_model=LoadChatReply, response_model_exclude_none=True)
async def load_chat(project_id: str, session_id: str, store: TranscriptStore = Depends(get_transcript_store)):
    """Return the most recent snapshot for a project/session pair."""

    try:
        result = store.load_latest(project_id, session_id)
    except TranscriptStoreError as e:
        logger.error(f"Error loading chat: {e}")
        return failure_response("Failed to load chat", e)

    if not result.found:
        return LoadChatReply(messages=[], message="No saved chats found for this project/session")

    return LoadChatReply(
        messages=result.messages,
        metadata=result.metadata,
        saved_at=result.saved_at,
        filename=result.filename,
    )


@router.get("/list", response_model=ChatListReply)
async def list_chats(store: TranscriptStore = Depends(get_transcript_store)):
    """List every saved transcript, most recently modified first."""

    try:
        summaries = store.list_all()
    except TranscriptStoreError as e:
        logger.error(f"Error listing chats: {e}")
        return failure_response("Failed to list chats", e)

    chats = [
        ChatSummary(
            filename=summary.filename,
            project_id=summary.project_id,
            session_id=summary.session_id,
            message_count=summary.message_count,
            saved_at=summary.saved_at,
            last_modified=summary.last_modified,
            metadata=summary.metadata,
        )
        for summary in summaries
    ]
    return ChatListReply(chats=chats, total=len(chats))


@router.delete("/delete/{filename}", response_model=DeleteChatReply)
async def delete_chat(filename: str, store: TranscriptStore = Depends(get_transcript_store)):
    """Remove one saved transcript file."""

    try:
        store.delete(filename)
    except TranscriptNotFoundError:
        return error_response("Chat file not found", status_code=404, filename=filename)
    except TranscriptStoreError as e:
        logger.error(f"Error deleting chat: {e}")
        return failure_response("Failed to delete chat", e)

    return DeleteChatReply(filename=filename)


__all__ = ["router"]
