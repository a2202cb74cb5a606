from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a role-tagged message sent to the completion service."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'system', 'user' or 'assistant'")
    content: str = Field(description="Content of the message")


class LLMResponse(BaseModel):
    """First completion choice returned by an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
