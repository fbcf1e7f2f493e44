"""
Language model adapter.

Turns any LangChain BaseChatModel into the language model capability used
by the pipeline: one-shot completion and chunked streaming, each wait
bounded by a timeout, and every provider failure raised as
ModelUnavailableError.

Dependencies: langchain_core.language_models
System role: Chat model boundary
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.prompt_values import PromptValue

from focusrag.core.exceptions import ModelUnavailableError

logger = logging.getLogger(__name__)


def message_text(content: Any) -> str:
    """
    Extract plain text from a message content payload.

    Providers return either a string or a list of content blocks.
    """
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class LanguageModel:
    """Bounded, typed wrapper around a LangChain chat model."""

    def __init__(self, model: BaseChatModel, timeout_seconds: float = 60.0) -> None:
        """
        Initialize the adapter.

        Args:
            model: Shared chat model, never mutated
            timeout_seconds: Bound on a completion and on each streamed chunk
        """
        self._model = model
        self._timeout = timeout_seconds

    @property
    def model(self) -> BaseChatModel:
        """Underlying chat model."""
        return self._model

    def _for_call(self, temperature: float | None) -> BaseChatModel:
        """Return the model to use for one call, copied when temperature differs."""
        if temperature is None or "temperature" not in type(self._model).model_fields:
            return self._model
        return self._model.model_copy(update={"temperature": temperature})

    async def complete(self, prompt: PromptValue, temperature: float | None = None) -> str:
        """
        Run one non-streamed completion.

        Args:
            prompt: Rendered prompt
            temperature: Optional per-call sampling temperature

        Returns:
            str: Full model output text

        Raises:
            ModelUnavailableError: Provider failure or timeout
        """
        model = self._for_call(temperature)
        try:
            message = await asyncio.wait_for(model.ainvoke(prompt), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise ModelUnavailableError(
                f"Language model timed out after {self._timeout}s",
                operation="complete",
            ) from e
        except Exception as e:
            raise ModelUnavailableError(
                f"Language model call failed: {type(e).__name__}",
                operation="complete",
            ) from e
        return message_text(message.content)

    async def stream(self, prompt: PromptValue, temperature: float | None = None) -> AsyncIterator[str]:
        """
        Stream model output as text chunks.

        Empty chunks are skipped. The wait for each chunk is bounded.

        Args:
            prompt: Rendered prompt
            temperature: Optional per-call sampling temperature

        Yields:
            str: Non-empty text chunks in model order

        Raises:
            ModelUnavailableError: Provider failure or timeout mid-stream
        """
        model = self._for_call(temperature)
        chunk_count = 0
        async with aclosing(model.astream(prompt)) as chunks:
            iterator = chunks.__aiter__()
            while True:
                try:
                    chunk = await asyncio.wait_for(iterator.__anext__(), timeout=self._timeout)
                except StopAsyncIteration:
                    break
                except asyncio.TimeoutError as e:
                    raise ModelUnavailableError(
                        f"Language model stream stalled for {self._timeout}s",
                        operation="stream",
                        details={"chunks_received": chunk_count},
                    ) from e
                except Exception as e:
                    raise ModelUnavailableError(
                        f"Language model stream failed: {type(e).__name__}",
                        operation="stream",
                        details={"chunks_received": chunk_count},
                    ) from e

                text = message_text(chunk.content)
                if text:
                    chunk_count += 1
                    yield text

        logger.debug(f"{__name__}:stream - Stream complete chunks={chunk_count}")
