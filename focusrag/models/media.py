"""
Media search result models.

Image and video results surfaced beside an answer. Each kind has its own
set of required fields, checked when a raw search result is converted.

Dependencies: pydantic
System role: Media search data structures
"""

from pydantic import BaseModel, Field

from focusrag.models.document import SearchResult


class ImageResult(BaseModel):
    """Image found by the image search."""

    img_src: str = Field(description="Direct image URL")
    url: str = Field(description="Page the image was found on")
    title: str = Field(description="Image title")

    @classmethod
    def from_search_result(cls, result: SearchResult) -> "ImageResult | None":
        """Build an image result, or None when a required field is missing."""
        if result.img_src and result.url and result.title:
            return cls(img_src=result.img_src, url=result.url, title=result.title)
        return None


class VideoResult(BaseModel):
    """Video found by the video search."""

    img_src: str = Field(description="Thumbnail URL")
    url: str = Field(description="Video page URL")
    title: str = Field(description="Video title")
    iframe_src: str = Field(description="Embeddable player URL")

    @classmethod
    def from_search_result(cls, result: SearchResult) -> "VideoResult | None":
        """Build a video result, or None when a required field is missing."""
        if result.thumbnail and result.url and result.title and result.iframe_src:
            return cls(
                img_src=result.thumbnail,
                url=result.url,
                title=result.title,
                iframe_src=result.iframe_src,
            )
        return None
