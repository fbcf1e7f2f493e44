"""
Search result and document domain models.

Normalizes raw metasearch results into one result shape with optional
fields, and maps them onto LangChain documents used as citation context.

Dependencies: pydantic, langchain_core.documents
System role: Retrieval data structures
"""

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchResult(BaseModel):
    """
    Single raw result returned by the search backend.

    Missing optional fields never fail validation; callers decide which
    fields they require.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(default="", description="Result title")
    url: str = Field(default="", description="Result URL")
    content: str = Field(default="", description="Snippet text (may be empty)")
    img_src: str | None = Field(default=None, description="Image URL")
    thumbnail: str | None = Field(default=None, description="Thumbnail URL")
    iframe_src: str | None = Field(default=None, description="Embeddable player URL")

    @field_validator("title", "url", "content", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        """Backends send null for absent text fields."""
        return "" if value is None else value

    @field_validator("img_src", "thumbnail", "iframe_src", mode="before")
    @classmethod
    def _empty_to_none(cls, value: object) -> object:
        """Treat blank URLs as missing."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchResponse(BaseModel):
    """Search backend response: ordered results plus query suggestions."""

    model_config = ConfigDict(extra="ignore")

    results: list[SearchResult] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class DocumentMetadata(BaseModel):
    """Citation metadata attached to every context document."""

    title: str
    url: str
    img_src: str | None = None


def result_to_document(result: SearchResult, fallback_to_title: bool = False) -> Document:
    """
    Map a search result onto a citable document.

    Args:
        result: Raw search result
        fallback_to_title: Use the title as content when the snippet is empty

    Returns:
        Document: Document whose page_content is the snippet text
    """
    content = result.content
    if not content and fallback_to_title:
        content = result.title

    metadata = DocumentMetadata(
        title=result.title,
        url=result.url,
        img_src=result.img_src,
    )
    return Document(
        page_content=content,
        metadata=metadata.model_dump(exclude_none=True),
    )


def document_to_dict(document: Document) -> dict:
    """Convert a document to its JSON wire form."""
    return {
        "page_content": document.page_content,
        "metadata": dict(document.metadata),
    }
