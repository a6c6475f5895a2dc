"""End-to-end tests of the HTTP surface with providers and storage swapped for test doubles."""

import re

from conftest import ScriptedProvider


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"


def test_chat_with_every_provider_down_uses_fallback(client, providers):
    response = client.post("/api/chat", json={
        "message": "test", "agent": "archive", "session": "general", "multiAgent": False,
    })

    assert response.status_code == 200
    body = response.json()
    assert "Fallback Mode" in body["content"]
    assert body["llmUsed"] is False
    assert body["model"] == "fallback"
    assert body["agent"] == "archive"
    assert body["session"] == "general"
    assert body["multiAgent"] is False
    assert body["processingTime"] == 50
    assert body["timestamp"].endswith("Z")
    assert [len(p.calls) for p in providers] == [1, 1, 1]


def test_chat_returns_first_provider_reply(client, providers):
    providers[0].reply = "From the local model"

    body = client.post("/api/chat", json={"message": "hi", "agent": "codex", "session": "s"}).json()

    assert body["content"] == "From the local model"
    assert body["llmUsed"] is True
    assert body["model"] == "test-model"
    assert body["confidence"] == 0.9
    assert body["sources"] == 3
    assert providers[1].calls == []


def test_chat_multi_agent_flag_is_echoed(client):
    body = client.post("/api/chat", json={
        "message": "hi", "agent": "codex", "session": "s", "multiAgent": True,
    }).json()

    assert body["multiAgent"] is True
    assert "Multi-Agent Collaboration Response" in body["content"]


def test_chat_missing_fields_is_400(client, providers):
    response = client.post("/api/chat", json={"message": "", "agent": "archive"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["missing"] == ["message", "session"]
    assert all(p.calls == [] for p in providers)


def test_chat_internal_error_is_500(client, providers):
    class Exploding(ScriptedProvider):
        async def generate(self, system_prompt, message):
            raise RuntimeError("boom")

    providers[0] = Exploding("ollama")

    response = client.post("/api/chat", json={"message": "hi", "agent": "archive", "session": "s"})

    assert response.status_code == 500
    assert response.json()["details"] == "boom"


def test_save_then_load(client):
    saved = client.post("/api/chat/save", json={
        "projectId": "p1", "sessionId": "s1", "messages": [{"role": "user", "content": "hi"}],
    })

    assert saved.status_code == 200
    saved_body = saved.json()
    assert saved_body["success"] is True
    assert saved_body["messageCount"] == 1
    assert re.fullmatch(r"p1_s1_\d+\.json", saved_body["filename"])

    loaded = client.get("/api/chat/load/p1/s1").json()

    assert loaded["success"] is True
    assert loaded["messages"] == [{"role": "user", "content": "hi"}]
    assert loaded["filename"] == saved_body["filename"]
    assert loaded["metadata"] == {}
    assert "savedAt" in loaded


def test_save_missing_fields_is_400(client):
    response = client.post("/api/chat/save", json={"projectId": "p1"})

    assert response.status_code == 400
    assert response.json()["missing"] == ["sessionId", "messages"]


def test_load_with_nothing_saved(client):
    body = client.get("/api/chat/load/p9/s9").json()

    assert body["success"] is True
    assert body["messages"] == []
    assert "filename" not in body


def test_list_and_delete(client):
    first = client.post("/api/chat/save", json={"projectId": "a", "sessionId": "b", "messages": []}).json()
    client.post("/api/chat/save", json={"projectId": "c", "sessionId": "d", "messages": [{"role": "user", "content": "x"}]})

    listing = client.get("/api/chat/list").json()
    assert listing["total"] == 2
    assert {chat["projectId"] for chat in listing["chats"]} == {"a", "c"}
    assert all("lastModified" in chat for chat in listing["chats"])

    deleted = client.delete(f"/api/chat/delete/{first['filename']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Chat deleted successfully", "filename": first["filename"]}
    assert client.get("/api/chat/list").json()["total"] == 1


def test_delete_unknown_file_is_404(client):
    response = client.delete("/api/chat/delete/missing_file_1.json")

    assert response.status_code == 404
    assert response.json()["error"] == "Chat file not found"


def test_status_reports_static_flags(client):
    body = client.get("/api/status").json()

    assert body["status"] == "running"
    assert body["providerOrder"] == ["ollama", "openai", "phala"]
    assert body["openaiConfigured"] is True
    assert body["ollamaEndpoint"] == "http://ollama.test:11434"
    assert body["discourseConfigured"] is False
    assert body["finalFallback"] == "Static Responses"


def test_test_llm_reports_failures(client):
    body = client.get("/api/test-llm").json()

    assert body["status"] == "all_llm_failed"
    assert body["llmAvailable"] is False
    assert set(body["errors"]) == {"ollama", "openai", "phala"}


def test_test_ollama_success(client, providers):
    providers[0].reply = "pong " * 50

    body = client.get("/api/test-ollama").json()

    assert body["status"] == "working"
    assert body["llmAvailable"] is True
    assert body["response"].endswith("...")
    assert len(body["response"]) == 103


def test_agents_and_block_sessions(client):
    agents = client.get("/api/agents").json()["agents"]
    sessions = client.get("/api/sessions").json()["sessions"]

    assert [a["id"] for a in agents] == ["archive", "codex", "discourse"]
    assert len(sessions) == 5


def test_conference_listing(client):
    tracks = client.get("/api/conference/tracks").json()
    sessions = client.get("/api/conference/sessions").json()
    ikp = client.get("/api/conference/tracks/ikp/sessions").json()

    assert tracks["total"] == 5
    assert sessions["total"] == 19
    assert ikp["trackId"] == "ikp"
    assert ikp["total"] == 4
    assert all(s["workingGroup"] == "IKP" for s in ikp["sessions"])
    assert "sessionType" in sessions["sessions"][0]


def test_conference_session_lookup(client):
    found = client.get("/api/conference/sessions/day2-5pm-6pm")
    missing = client.get("/api/conference/sessions/day9")

    assert found.json()["session"]["title"] == "Security Gathering on the Hill"
    assert missing.status_code == 404


def test_conference_session_init_creates_loadable_transcript(client):
    init = client.post("/api/conference/sessions/day1-11am-1230pm/init")

    assert init.status_code == 200
    body = init.json()
    assert body["filename"].startswith("bgin-conference-2025_day1-11am-1230pm_")
    assert body["metadata"]["sessionRoom"] == "Arrupe Hall"

    loaded = client.get("/api/chat/load/bgin-conference-2025/day1-11am-1230pm").json()
    assert len(loaded["messages"]) == 1
    assert loaded["messages"][0]["role"] == "system"
    assert loaded["messages"][0]["content"].startswith("Welcome to Offline Key Management!")


def test_conference_init_unknown_session_is_404(client):
    assert client.post("/api/conference/sessions/nope/init").status_code == 404


def test_discourse_status_unconfigured(client):
    body = client.get("/api/discourse/status").json()

    assert body["discourseConfigured"] is False
    assert body["status"] == "Not Configured"


def test_discourse_publish_validation_and_unconfigured_failure(client):
    missing = client.post("/api/discourse/publish", json={"title": "Only a title"})
    assert missing.status_code == 400
    assert missing.json()["missing"] == ["content"]

    failed = client.post("/api/discourse/publish", json={"title": "T", "content": "C"})
    assert failed.status_code == 500
    assert "not configured" in failed.json()["details"]


def test_discourse_categories_unconfigured_is_reported_in_body(client):
    body = client.get("/api/discourse/categories").json()

    assert body["success"] is False
    assert "not configured" in body["error"]


def test_save_with_path_in_ids_is_400_and_writes_nothing(client, settings):
    response = client.post("/api/chat/save", json={"projectId": "../escaped", "sessionId": "s", "messages": []})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert list(settings.chat_storage_dir.parent.glob("escaped_*")) == []


def test_list_with_wrongly_shaped_file_is_500_with_details(client, settings):
    settings.chat_storage_dir.mkdir(parents=True, exist_ok=True)
    (settings.chat_storage_dir / "x.json").write_text('{"projectId": 5, "messages": 3}')

    response = client.get("/api/chat/list")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to list chats"
    assert "x.json" in response.json()["details"]


def test_load_with_wrongly_shaped_file_is_500_with_details(client, settings):
    settings.chat_storage_dir.mkdir(parents=True, exist_ok=True)
    (settings.chat_storage_dir / "p_s_7.json").write_text('{"messages": 3}')

    response = client.get("/api/chat/load/p/s")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to load chat"
