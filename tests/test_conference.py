"""Tests for the conference registry and session bootstrap."""

from bgin_server.services.conference import (
    CONFERENCE_SESSIONS,
    CONFERENCE_TRACKS,
    get_session,
    initialize_session,
    list_sessions,
)
from bgin_server.services.conference.registry import CONFERENCE_PROJECT_ID


def test_every_session_belongs_to_a_known_track():
    for session in CONFERENCE_SESSIONS.values():
        assert session.track in CONFERENCE_TRACKS
        assert session.working_group == CONFERENCE_TRACKS[session.track].working_group
        assert session.project_id == CONFERENCE_PROJECT_ID
        assert set(session.agents) <= {"archive", "codex", "discourse"}


def test_sessions_keep_schedule_order():
    ids = [session.id for session in list_sessions()]

    assert ids[0] == "day1-9am-1030am"
    assert ids[-1] == "day3-245pm-415pm-hariri240"
    assert len(ids) == len(set(ids)) == 19


def test_sessions_by_track():
    assert {s.id for s in list_sessions("general")} == {"day1-510pm-reception", "day2-330pm-5pm"}
    assert list_sessions("unknown-track") == []


def test_camel_case_dump():
    dumped = get_session("day1-9am-1030am").model_dump(by_alias=True)

    assert dumped["sessionType"] == "hackathon"
    assert dumped["workingGroup"] == "BGIN Agent Hack"
    assert dumped["projectId"] == CONFERENCE_PROJECT_ID


def test_initialize_session_saves_welcome_transcript(store):
    session = get_session("day3-9am-1030am-hariri140")

    result = initialize_session(session, store)
    loaded = store.load_latest(CONFERENCE_PROJECT_ID, session.id)

    assert loaded.filename == result.saved.filename
    assert loaded.metadata["availableAgents"] == ["codex", "archive"]
    assert loaded.metadata["sessionType"] == "technical-standards"
    message = loaded.messages[0]
    assert message["isSystemMessage"] is True
    assert "**Available Agents:** codex, archive" in message["content"]
    assert "Room: Hariri 140" in message["content"]
