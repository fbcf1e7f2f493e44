"""
Langfuse prompt registry for versioned focus-mode prompts.

Singleton registry that pushes the bundled LangChain templates to Langfuse
and resolves them back, falling back to the bundled template whenever the
registry is disabled or the prompt cannot be fetched.

Dependencies: langfuse, focusrag.configs, focusrag.observability.prompt_registry
System role: Prompt version control and retrieval
"""

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.prompts import ChatPromptTemplate, PromptTemplate
from langfuse import Langfuse

from focusrag.configs import get_settings
from focusrag.observability.prompt_registry.converter import (
    convert_chat_template,
    convert_text_template,
)
from focusrag.observability.prompt_registry.models import ModelConfig

if TYPE_CHECKING:
    from langfuse.model import ChatPromptClient, TextPromptClient

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Attributes:
        _instance: Singleton instance
        _client: Langfuse client
        _enabled: Whether Langfuse integration is enabled
        _label: Default label used when fetching prompts

    Example:
        >>> registry = PromptRegistry()
        >>> registry.register_prompt(
        ...     name="webSearch-answer",
        ...     template=web_config.answer_prompt,
        ...     config=ModelConfig(model="gemini-2.5-flash", temperature=0.7),
        ...     labels=["production"],
        ... )
        >>> prompt = registry.resolve("webSearch-answer", web_config.answer_prompt)
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False
    _label: str | None = None

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next construction re-reads settings."""
        cls._instance = None

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        obs_settings = get_settings().observability
        self._label = obs_settings.prompt_label

        if not (obs_settings.enable_tracing and obs_settings.use_prompt_registry):
            logger.info(f"{__name__}:_initialize - Prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.public_key or not obs_settings.secret_key:
            logger.warning(f"{__name__}:_initialize - Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.public_key,
            secret_key=obs_settings.secret_key,
            host=obs_settings.host,
        )
        self._enabled = True
        logger.info(f"{__name__}:_initialize - Prompt registry initialized: host={obs_settings.host}")

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: ChatPromptTemplate | PromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> "ChatPromptClient | TextPromptClient | None":
        """
        Register or version a prompt in Langfuse.

        Args:
            name: Unique prompt identifier
            template: LangChain ChatPromptTemplate or PromptTemplate
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production"])

        Returns:
            Created Langfuse prompt, or None if disabled

        Raises:
            ValueError: If template type is unsupported
        """
        if not self._enabled or self._client is None:
            logger.debug(f"{__name__}:register_prompt - Registry disabled, skipping name={name}")
            return None

        if isinstance(template, ChatPromptTemplate):
            prompt_type, body = "chat", convert_chat_template(template)
        elif isinstance(template, PromptTemplate):
            prompt_type, body = "text", convert_text_template(template)
        else:
            raise ValueError(f"Unsupported template type: {type(template)}")

        prompt = self._client.create_prompt(
            name=name,
            type=prompt_type,
            prompt=body,
            config=config.to_langfuse_config(),
            labels=labels or [],
        )
        logger.info(
            f"{__name__}:register_prompt - Registered {prompt_type} prompt "
            f"name={name} version={prompt.version}"
        )
        return prompt

    def get_langchain_prompt(
        self,
        name: str,
        label: str | None = None,
    ) -> ChatPromptTemplate | PromptTemplate | None:
        """
        Fetch a prompt from Langfuse as a LangChain template.

        Args:
            name: Prompt identifier
            label: Optional label filter, defaults to the configured label

        Returns:
            ChatPromptTemplate for chat prompts, PromptTemplate for text
            prompts, or None if the registry is disabled
        """
        if not self._enabled or self._client is None:
            return None

        kwargs: dict[str, Any] = {"name": name}
        if label or self._label:
            kwargs["label"] = label or self._label

        prompt = self._client.get_prompt(**kwargs)
        converted = prompt.get_langchain_prompt()
        if isinstance(converted, str):
            template: ChatPromptTemplate | PromptTemplate = PromptTemplate.from_template(converted)
        else:
            template = ChatPromptTemplate.from_messages(converted)
        template.metadata = {"langfuse_prompt": prompt}
        return template

    def resolve(
        self,
        name: str,
        fallback: ChatPromptTemplate | PromptTemplate,
        label: str | None = None,
    ) -> ChatPromptTemplate | PromptTemplate:
        """
        Resolve a prompt by name, using the bundled template as fallback.

        The fetched template must accept the same input variables as the
        fallback, otherwise the fallback is used.

        Args:
            name: Prompt identifier
            fallback: Bundled template
            label: Optional label filter

        Returns:
            Registry template when available and compatible, else fallback
        """
        if not self._enabled:
            return fallback

        try:
            template = self.get_langchain_prompt(name, label=label)
        except Exception as e:
            logger.warning(f"{__name__}:resolve - Could not fetch prompt name={name}: {e}")
            return fallback

        if template is None or set(template.input_variables) != set(fallback.input_variables):
            logger.warning(f"{__name__}:resolve - Using bundled prompt for name={name}")
            return fallback
        return template
