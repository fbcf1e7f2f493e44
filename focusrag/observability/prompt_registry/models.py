"""
Model configuration stored with registered prompts.

Langfuse keeps a free-form config next to each prompt version; focusrag
records the chat model, its temperature and the focus mode the prompt
belongs to.

Dependencies: pydantic
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM configuration stored next to a registered prompt.

    Attributes:
        model: Chat model identifier
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Maximum tokens in response
        extra: Additional keys flattened into the stored config
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    extra: dict[str, Any] | None = None

    @classmethod
    def for_focus_mode(cls, model: str, focus_mode: str, temperature: float | None = None) -> "ModelConfig":
        """Config for a prompt owned by one focus mode."""
        return cls(model=model, temperature=temperature, extra={"focus_mode": focus_mode})

    def to_langfuse_config(self) -> dict[str, Any]:
        """Flatten to the config dict Langfuse stores with a prompt."""
        config = self.model_dump(exclude_none=True, exclude={"extra"})
        config.update(self.extra or {})
        return config
