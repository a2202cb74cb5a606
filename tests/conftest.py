"""Pytest configuration and shared fixtures."""
import json
import os
import subprocess
from pathlib import Path

import httpx
import pytest

from diffscribe.llm import LLMProvider, LLMResponse


class FakeLLM(LLMProvider):
    """In-memory provider recording every request."""

    def __init__(self, content: str = "Add foo", error: Exception | None = None, model: str = "fake-model"):
        self.content = content
        self.error = error
        self.model = model
        self.calls: list[dict] = []
        self.closed = False

    async def chat_completion(self, messages, model=None, temperature=None, max_tokens=None, **kwargs):
        self.calls.append({"messages": messages, "model": model})
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            model=model or self.model,
            usage={"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
        )

    async def close(self) -> None:
        self.closed = True


class RecordingDiffSource:
    """Diff source returning a fixed diff or raising a fixed error."""

    def __init__(self, diff: str = "+foo", error: Exception | None = None):
        self.diff = diff
        self.error = error
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.diff


@pytest.fixture(autouse=True)
def clean_openai_env(monkeypatch):
    """Keep the developer's OpenAI settings out of the tests."""
    for name in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_CHAT_MODEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_llm_factory():
    """Return the FakeLLM class for building providers in tests."""
    return FakeLLM


@pytest.fixture
def diff_source_factory():
    """Return the RecordingDiffSource class."""
    return RecordingDiffSource


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """Create an empty git repository and return its path."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "dev@example.com")
    _git(repo, "config", "user.name", "Dev")
    return repo


@pytest.fixture
def stage_file():
    """Write a file into a repository and stage it."""
    def _stage(repo: Path, name: str, content: str) -> None:
        (repo / name).write_text(content)
        _git(repo, "add", name)
    return _stage


@pytest.fixture
def not_a_repo(tmp_path, monkeypatch):
    """A directory git will not resolve to any repository."""
    path = tmp_path / "plain"
    path.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return path


def completion_payload(content: str | None = "Add foo", choices: int = 1) -> dict:
    """Build an OpenAI chat.completion response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": i,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
            for i in range(choices)
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
    }


class OpenAIStub:
    """httpx transport handler standing in for the OpenAI API."""

    def __init__(self, status_code: int = 200, body: dict | None = None):
        self.status_code = status_code
        self.body = body if body is not None else completion_payload()
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def request_json(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def openai_stub():
    """Factory for OpenAIStub instances."""
    def _make(status_code: int = 200, body: dict | None = None) -> OpenAIStub:
        return OpenAIStub(status_code=status_code, body=body)
    return _make


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"openai": os.getenv("DIFFSCRIBE_TEST_OPENAI_API_KEY")}


@pytest.fixture
def completion_body():
    """Factory for chat.completion response bodies."""
    return completion_payload
