"""Request and response bodies for the chat, transcript and forum endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON uses camelCase keys; Python code uses snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatBody(CamelModel):
    """Body of POST /api/chat. Presence is checked in the route so the 400 can list missing fields."""
    message: Optional[str] = None
    agent: Optional[str] = None
    session: Optional[str] = None
    multi_agent: bool = False


class ChatReply(CamelModel):
    content: str
    agent: str
    session: str
    timestamp: str
    confidence: float
    sources: int
    processing_time: int
    llm_used: bool
    model: str
    multi_agent: bool = False


class SaveChatBody(CamelModel):
    project_id: Optional[str] = None
    session_id: Optional[str] = None
    messages: Optional[List[Dict[str, Any]]] = None  # role, content, agentType?, modelUsed?, metadata?
    metadata: Optional[Dict[str, Any]] = None


class SaveChatReply(CamelModel):
    success: bool = True
    message: str = "Chat saved successfully"
    filename: str
    project_id: str
    session_id: str
    message_count: int


class LoadChatReply(CamelModel):
    success: bool = True
    messages: List[Any]
    metadata: Dict[str, Any] = {}
    saved_at: Optional[str] = None
    filename: Optional[str] = None
    message: Optional[str] = None


class ChatSummary(CamelModel):
    filename: str
    project_id: Optional[str] = None
    session_id: Optional[str] = None
    message_count: int
    saved_at: Optional[str] = None
    last_modified: str
    metadata: Dict[str, Any] = {}


class ChatListReply(CamelModel):
    success: bool = True
    chats: List[ChatSummary]
    total: int


class DeleteChatReply(CamelModel):
    success: bool = True
    message: str = "Chat deleted successfully"
    filename: str


class PublishBody(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[int] = None
    tags: Optional[List[str]] = None
    session_id: Optional[str] = None
    project_id: Optional[str] = None
    agent_type: Optional[str] = None


class ReplyBody(CamelModel):
    topic_id: Optional[int] = None
    content: Optional[str] = None
    session_id: Optional[str] = None
    project_id: Optional[str] = None
    agent_type: Optional[str] = None


def missing_fields(body: BaseModel, *names: str) -> List[str]:
    """camelCase names of the given fields that are absent or empty."""
    return [to_camel(name) for name in names if not getattr(body, name)]
