import pytest
from fastapi.testclient import TestClient

from goalflow.settings import Settings
from goalflow.agents.llm.base import LLMClient
from goalflow.agents.workflow import WorkflowController
from goalflow.main import create_app


class FakeLLMClient(LLMClient):
    """Returns scripted replies in order and records every prompt it was given."""
    provider = "fake"

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def make_fake_llm():
    return FakeLLMClient


@pytest.fixture
def fake_llm(make_fake_llm):
    return make_fake_llm()


@pytest.fixture
def controller(fake_llm):
    return WorkflowController(fake_llm, temperature=0.3)


@pytest.fixture
def settings():
    return Settings(_env_file=None, LLM_PROVIDER="gemini", GEMINI_API_KEY=None)


@pytest.fixture
def client(settings, fake_llm):
    app = create_app(settings, llm=fake_llm)
    return TestClient(app)
