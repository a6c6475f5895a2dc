"""Data models for conference tracks and sessions."""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ConferenceTrack(_CamelModel):
    """A working-group track sessions are grouped under."""
    id: str
    name: str
    description: str
    color: str
    icon: str
    working_group: str


class ConferenceSession(_CamelModel):
    """One scheduled conference session with its own chat transcript."""
    id: str
    title: str
    date: str
    time: str
    room: str
    description: str
    agents: List[str]
    session_type: str  # "hackathon", "technical-standards", "regulatory", ...
    project_id: str
    track: str
    working_group: str
    focus: str
