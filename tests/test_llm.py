"""Unit tests for the LLM provider module."""
import openai
import pytest
from pydantic import ValidationError

from diffscribe.errors import EmptyResponseError, GenerationFailedError
from diffscribe.llm import (
    DEFAULT_MODEL,
    ChatMessage,
    LLMProvider,
    LLMResponse,
    OpenAIProvider,
    create_llm_provider,
)

MESSAGES = [
    ChatMessage(role="system", content="You write commit messages."),
    ChatMessage(role="user", content="+foo"),
]


class TestLLMProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore

    @pytest.mark.asyncio
    async def test_context_manager_closes(self, fake_llm_factory):
        """Test that leaving the context closes the provider."""
        llm = fake_llm_factory()
        async with llm as entered:
            assert entered is llm
        assert llm.closed


class TestModels:
    """Tests for the pydantic models."""

    def test_chat_message_is_frozen(self):
        """Test that messages cannot be mutated."""
        message = ChatMessage(role="user", content="hi")
        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore[misc]

    def test_response_usage_defaults_to_none(self):
        """Test that usage is optional."""
        response = LLMResponse(content="Add foo", model="gpt-3.5-turbo")
        assert response.usage is None


class TestOpenAIProvider:
    """Tests for OpenAIProvider against a stubbed HTTP API."""

    def test_default_model(self):
        """Test that the fixed default model is used."""
        assert OpenAIProvider(api_key="test-key").model == DEFAULT_MODEL == "gpt-3.5-turbo"

    @pytest.mark.asyncio
    async def test_returns_first_choice(self, openai_stub):
        """Test that the first choice's content is returned."""
        stub = openai_stub()
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            response = await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert response.content == "Add foo"
        assert response.model == "gpt-3.5-turbo"
        assert response.usage == {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12}

    @pytest.mark.asyncio
    async def test_request_body(self, openai_stub):
        """Test the model and ordered role-tagged messages sent to the API."""
        stub = openai_stub()
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        request = stub.requests[0]
        assert request.url.path.endswith("/chat/completions")
        assert request.headers["Authorization"] == "Bearer test-key"
        body = stub.request_json()
        assert body["model"] == "gpt-3.5-turbo"
        assert body["messages"] == [
            {"role": "system", "content": "You write commit messages."},
            {"role": "user", "content": "+foo"},
        ]
        assert "temperature" not in body
        assert "max_tokens" not in body

    @pytest.mark.asyncio
    async def test_optional_parameters(self, openai_stub):
        """Test that model override, temperature and max_tokens are forwarded."""
        stub = openai_stub()
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            await provider.chat_completion(MESSAGES, model="gpt-4o-mini", temperature=0.2, max_tokens=64)
        finally:
            await provider.close()

        body = stub.request_json()
        assert body["model"] == "gpt-4o-mini"
        assert body["temperature"] == 0.2
        assert body["max_tokens"] == 64

    @pytest.mark.asyncio
    async def test_key_is_read_from_environment_at_call_time(self, openai_stub, monkeypatch):
        """Test that OPENAI_API_KEY set after construction is used."""
        stub = openai_stub()
        provider = OpenAIProvider(http_client=stub.client())
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")

        try:
            await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert stub.requests[0].headers["Authorization"] == "Bearer env-key"

    @pytest.mark.asyncio
    async def test_missing_key_fails_generation(self, openai_stub):
        """Test that an absent credential surfaces as GenerationFailedError."""
        stub = openai_stub()
        provider = OpenAIProvider(http_client=stub.client())

        with pytest.raises(GenerationFailedError, match="OPENAI_API_KEY") as exc_info:
            await provider.chat_completion(MESSAGES)

        assert isinstance(exc_info.value.__cause__, openai.OpenAIError)
        assert stub.requests == []

    @pytest.mark.asyncio
    async def test_zero_choices_raise_empty_response(self, openai_stub, completion_body):
        """Test that an empty choices list is an explicit error."""
        stub = openai_stub(body=completion_body(choices=0))
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            with pytest.raises(EmptyResponseError) as exc_info:
                await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert isinstance(exc_info.value, GenerationFailedError)
        assert "no completion choices" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_null_content_becomes_empty_string(self, openai_stub, completion_body):
        """Test that a choice without content yields an empty string."""
        stub = openai_stub(body=completion_body(content=None))
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            response = await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert response.content == ""

    @pytest.mark.asyncio
    async def test_authentication_error(self, openai_stub):
        """Test that a 401 response maps to GenerationFailedError."""
        stub = openai_stub(
            status_code=401,
            body={"error": {"message": "Incorrect API key provided", "type": "invalid_request_error", "code": "invalid_api_key"}},
        )
        provider = OpenAIProvider(api_key="bad-key", http_client=stub.client())

        try:
            with pytest.raises(GenerationFailedError, match="Incorrect API key") as exc_info:
                await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert isinstance(exc_info.value.__cause__, openai.AuthenticationError)

    @pytest.mark.asyncio
    async def test_rate_limit_is_not_retried(self, openai_stub):
        """Test that retries are disabled by default."""
        stub = openai_stub(
            status_code=429,
            body={"error": {"message": "Rate limit reached", "type": "requests", "code": "rate_limit_exceeded"}},
        )
        provider = OpenAIProvider(api_key="test-key", http_client=stub.client())

        try:
            with pytest.raises(GenerationFailedError) as exc_info:
                await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert isinstance(exc_info.value.__cause__, openai.RateLimitError)
        assert len(stub.requests) == 1

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test that transport failures map to GenerationFailedError."""
        import httpx

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = OpenAIProvider(
            api_key="test-key",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(refuse)),
        )

        try:
            with pytest.raises(GenerationFailedError) as exc_info:
                await provider.chat_completion(MESSAGES)
        finally:
            await provider.close()

        assert isinstance(exc_info.value.__cause__, openai.APIConnectionError)

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        """Test that closing an unused provider does nothing."""
        provider = OpenAIProvider(api_key="test-key")
        await provider.close()
        await provider.close()

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_chat_completion_real_api(self, api_keys):
        """Integration test: generate with the real API."""
        if not api_keys["openai"]:
            pytest.skip("DIFFSCRIBE_TEST_OPENAI_API_KEY not set")

        async with OpenAIProvider(api_key=api_keys["openai"]) as provider:
            response = await provider.chat_completion(MESSAGES)

        assert response.content


class TestLLMFactory:
    """Tests for the provider factory."""

    def test_create_openai_provider(self):
        """Test creating OpenAI provider via factory."""
        provider = create_llm_provider("openai", api_key="test-key", model="gpt-4o-mini")

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o-mini"

    def test_provider_name_is_case_insensitive(self):
        assert isinstance(create_llm_provider("OpenAI"), OpenAIProvider)

    def test_unknown_provider_raises(self):
        """Test that unsupported providers are rejected."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("deepseek", api_key="test-key")
