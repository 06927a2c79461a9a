from pydantic import BaseModel, ConfigDict, Field

from src.modules.proxy.models import DEFAULT_MODEL, MAX_TOKENS, TEMPERATURE, TOP_P


class ChatMessage(BaseModel):
    # Unknown keys from the client are forwarded untouched
    model_config = ConfigDict(extra="allow")

    role: str = Field(..., pattern="^(system|user|assistant)$")
    content: str


class ProxyRequest(BaseModel):
    messages: list[ChatMessage] | None = None


class UpstreamRequest(BaseModel):
    """Body of the chat-completions call made to the HuggingFace router."""

    model: str = DEFAULT_MODEL.id
    messages: list[ChatMessage]
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE
    top_p: float = TOP_P
    stream: bool = False


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    message: str
