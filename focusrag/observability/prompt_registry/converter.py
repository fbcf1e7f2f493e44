"""
LangChain to Langfuse prompt converter.

Langfuse stores variables as {{name}} while LangChain templates use {name};
chat templates are flattened to role/content messages.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import TypedDict

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder, PromptTemplate
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

_SINGLE_BRACE_VARIABLE = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")

_TEMPLATE_ROLES: dict[type, str] = {
    SystemMessagePromptTemplate: "system",
    HumanMessagePromptTemplate: "user",
    AIMessagePromptTemplate: "assistant",
}


class LangfuseMessage(TypedDict):
    """Langfuse chat message format."""

    role: str
    content: str


def to_langfuse_variables(text: str) -> str:
    """Rewrite {var} placeholders as {{var}}, leaving doubled braces alone."""
    return _SINGLE_BRACE_VARIABLE.sub(r"{{\1}}", text)


def convert_chat_template(template: ChatPromptTemplate) -> list[LangfuseMessage]:
    """
    Convert a ChatPromptTemplate to Langfuse chat messages.

    History placeholders become Langfuse placeholder messages so the
    fetched prompt still accepts a ``chat_history`` message list.

    Raises:
        ValueError: If the template holds an unsupported message type
    """
    messages: list[LangfuseMessage] = []
    for message in template.messages:
        if isinstance(message, MessagesPlaceholder):
            messages.append(
                LangfuseMessage(role="placeholder", content=message.variable_name)
            )
            continue

        role = _TEMPLATE_ROLES.get(type(message))
        if role is None:
            raise ValueError(f"Unsupported message type: {type(message)}")
        messages.append(
            LangfuseMessage(role=role, content=to_langfuse_variables(message.prompt.template))
        )
    return messages


def convert_text_template(template: PromptTemplate) -> str:
    """Convert a PromptTemplate to a Langfuse text prompt."""
    return to_langfuse_variables(template.template)
