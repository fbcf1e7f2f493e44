"""
Pipeline event schemas.

Defines the typed events a search pipeline emits while answering a query.
Every focus mode produces exactly this shape.

Dependencies: pydantic, langchain_core.documents
System role: Streaming protocol schemas
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field

from focusrag.models.document import document_to_dict


class PipelineEventType(str, Enum):
    """Server-to-client event types for a pipeline run."""

    SOURCES = "sources"
    RESPONSE = "response"
    END = "end"
    ERROR = "error"


class SourcesEvent(BaseModel):
    """
    Final context documents, emitted at most once before any response chunk.

    Attributes:
        documents: Documents in citation order (index + 1 is the citation number)
    """

    model_config = ConfigDict(frozen=True)

    type: Literal[PipelineEventType.SOURCES] = PipelineEventType.SOURCES
    documents: list[Document] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "type": self.type.value,
            "data": [document_to_dict(doc) for doc in self.documents],
        }


class ResponseEvent(BaseModel):
    """One incremental piece of the generated answer."""

    model_config = ConfigDict(frozen=True)

    type: Literal[PipelineEventType.RESPONSE] = PipelineEventType.RESPONSE
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"type": self.type.value, "data": self.text}


class EndEvent(BaseModel):
    """Terminal event for a successful run."""

    model_config = ConfigDict(frozen=True)

    type: Literal[PipelineEventType.END] = PipelineEventType.END

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"type": self.type.value}


class ErrorEvent(BaseModel):
    """Terminal event for a failed run, carrying a user-facing message."""

    model_config = ConfigDict(frozen=True)

    type: Literal[PipelineEventType.ERROR] = PipelineEventType.ERROR
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"type": self.type.value, "data": self.message}


PipelineEvent = Annotated[
    Union[SourcesEvent, ResponseEvent, EndEvent, ErrorEvent],
    Field(discriminator="type"),
]
