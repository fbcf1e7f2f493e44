"""
Chat domain models and schemas.

Conversation messages plus request/response schemas for search,
media search and suggestion operations.

Dependencies: pydantic, langchain_core.messages
System role: Chat API contracts
"""

from enum import Enum

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from pydantic import BaseModel, ConfigDict, Field

from focusrag.models.media import ImageResult, VideoResult


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Single message of a conversation, owned by the caller."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")

    def to_langchain(self) -> BaseMessage:
        """Convert to the LangChain message type for prompt rendering."""
        if self.role == ChatRole.USER:
            return HumanMessage(content=self.content)
        return AIMessage(content=self.content)


def to_langchain_history(history: list[ChatMessage]) -> list[BaseMessage]:
    """Convert a chat history to LangChain messages, preserving order."""
    return [message.to_langchain() for message in history]


def format_chat_history(history: list[ChatMessage]) -> str:
    """Render a chat history as "User: ..." / "AI: ..." lines for text prompts."""
    return "\n".join(
        f"{'User' if message.role == ChatRole.USER else 'AI'}: {message.content}"
        for message in history
    )


class SearchRequest(BaseModel):
    """Request schema for a streamed focus-mode answer."""

    query: str = Field(min_length=1, description="User question")
    focus_mode: str = Field(default="webSearch", description="Focus mode name")
    history: list[ChatMessage] = Field(default_factory=list, description="Prior conversation")


class MediaSearchRequest(BaseModel):
    """Request schema for image and video search."""

    query: str = Field(min_length=1, description="User question")
    history: list[ChatMessage] = Field(default_factory=list, description="Prior conversation")


class ImageSearchResponse(BaseModel):
    """Response schema for image search."""

    images: list[ImageResult]


class VideoSearchResponse(BaseModel):
    """Response schema for video search."""

    videos: list[VideoResult]


class SuggestionRequest(BaseModel):
    """Request schema for follow-up suggestions."""

    history: list[ChatMessage] = Field(default_factory=list, description="Conversation so far")


class SuggestionResponse(BaseModel):
    """Response schema for follow-up suggestions."""

    suggestions: list[str]


class FocusModeInfo(BaseModel):
    """Public description of a focus mode."""

    name: str
    source_label: str
    engines: list[str]
    retrieval: bool
    rerank: bool
