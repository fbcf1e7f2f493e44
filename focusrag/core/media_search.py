"""
Image and video search.

Rewrites the conversation's latest question for media search, queries the
media engines and keeps only results carrying every field the kind needs.

Dependencies: focusrag.core.pipeline.query_rewriter, focusrag.core.capabilities
System role: Media results shown beside an answer
"""

import logging

from focusrag.core.capabilities import LanguageModelCapability, SearchCapability
from focusrag.core.focus_modes.prompts import IMAGE_REWRITE_PROMPT, VIDEO_REWRITE_PROMPT
from focusrag.core.pipeline.query_rewriter import QueryRewriter
from focusrag.models.chat import ChatMessage
from focusrag.models.media import ImageResult, VideoResult

logger = logging.getLogger(__name__)

IMAGE_ENGINES = ["bing images", "google images"]
VIDEO_ENGINES = ["youtube"]
MAX_MEDIA_RESULTS = 10


class MediaSearch:
    """Image and video search over the shared search capability."""

    def __init__(self, llm: LanguageModelCapability, search: SearchCapability) -> None:
        self._search = search
        self._image_rewriter = QueryRewriter(llm, IMAGE_REWRITE_PROMPT)
        self._video_rewriter = QueryRewriter(llm, VIDEO_REWRITE_PROMPT)

    async def search_images(self, query: str, history: list[ChatMessage]) -> list[ImageResult]:
        """
        Find images for the query.

        Returns:
            Up to 10 images with img_src, url and title, in backend order

        Raises:
            ModelUnavailableError: Rewrite failed
            SearchUnavailableError: Search failed
        """
        rewrite = await self._image_rewriter.rewrite(query, history)
        response = await self._search.search(rewrite.query, engines=IMAGE_ENGINES)

        images = [
            image
            for image in (ImageResult.from_search_result(r) for r in response.results)
            if image is not None
        ][:MAX_MEDIA_RESULTS]
        logger.info(f"{__name__}:search_images - Returning {len(images)}/{len(response.results)} results")
        return images

    async def search_videos(self, query: str, history: list[ChatMessage]) -> list[VideoResult]:
        """
        Find videos for the query.

        Returns:
            Up to 10 videos with thumbnail, url, title and iframe_src

        Raises:
            ModelUnavailableError: Rewrite failed
            SearchUnavailableError: Search failed
        """
        rewrite = await self._video_rewriter.rewrite(query, history)
        response = await self._search.search(rewrite.query, engines=VIDEO_ENGINES)

        videos = [
            video
            for video in (VideoResult.from_search_result(r) for r in response.results)
            if video is not None
        ][:MAX_MEDIA_RESULTS]
        logger.info(f"{__name__}:search_videos - Returning {len(videos)}/{len(response.results)} results")
        return videos
