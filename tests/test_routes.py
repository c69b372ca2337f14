import pytest

from goalflow.agents.errors import ConfigurationError, TransportError
from goalflow.main import create_app
from fastapi.testclient import TestClient


def test_analyze_goal_over_http(client, fake_llm):
    fake_llm.replies.append("QUESTIONS:\nHow much time do you have?\nWhat have you tried?")

    r = client.post("/api/tasks", json={"step": "analyze_goal", "goal": "learn Spanish", "context": "trip in May"})

    assert r.status_code == 200
    body = r.json()
    assert body["type"] == "questions"
    assert body["questions"] == ["How much time do you have?", "What have you tried?"]
    assert body["message"]
    assert "tasks" not in body and "roadmap" not in body


def test_generate_tasks_over_http(client, fake_llm):
    fake_llm.replies.append("TASKS:\nlearn 10 words\nlisten to a podcast")

    r = client.post("/api/tasks", json={
        "step": "generate_tasks",
        "goal": "learn Spanish",
        "context": "",
        "roadmap": ["Hold a 5 minute conversation", "Read a short book"],
    })

    assert r.status_code == 200
    assert r.json() == {"type": "tasks", "tasks": ["learn 10 words", "listen to a podcast"]}
    assert "Current milestone: Hold a 5 minute conversation" in fake_llm.calls[0]["user"]


def test_unknown_step_is_400_without_llm_call(client, fake_llm):
    r = client.post("/api/tasks", json={"step": "summarize", "goal": "x", "context": "y"})
    assert r.status_code == 400
    assert fake_llm.calls == []


def test_invalid_json_is_400(client, fake_llm):
    r = client.post("/api/tasks", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert fake_llm.calls == []


def test_missing_roadmap_is_400(client, fake_llm):
    r = client.post("/api/tasks", json={"step": "generate_tasks", "goal": "x", "context": "y"})
    assert r.status_code == 400
    assert "roadmap" in r.json()["error"]
    assert fake_llm.calls == []


@pytest.mark.parametrize("reply", [
    "HELLO:\nfoo",
    "TASKS:\n   \n",
    TransportError("upstream 503 secret-detail"),
])
def test_internal_failures_are_generic_500(client, fake_llm, reply):
    fake_llm.replies.append(reply)

    r = client.post("/api/tasks", json={"step": "analyze_goal", "goal": "x", "context": "y"})

    assert r.status_code == 500
    assert r.json() == {"error": "failed to process request"}


def test_missing_credentials_fail_per_request(settings):
    app = create_app(settings)
    client = TestClient(app)

    r = client.post("/api/tasks", json={"step": "analyze_goal", "goal": "x", "context": "y"})

    assert r.status_code == 500
    assert r.json() == {"error": "failed to process request"}
    with pytest.raises(ConfigurationError):
        app.state.controller.llm.generate_text(system="s", user="u")


def test_cors_preflight(client):
    r = client.options("/api/tasks", headers={
        "Origin": "http://localhost:3000",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "Content-Type",
    })
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_health_reports_provider(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "provider": "fake"}
