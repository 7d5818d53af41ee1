"""LangChain-based conversational reservation assistant."""

from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from loguru import logger

from hotelsandbox.agent.interpreter import ResponseInterpreter
from hotelsandbox.agent.prompts import APOLOGY_MESSAGE, RESERVATION_AGENT_PROMPT
from hotelsandbox.core.config import SandboxConfig
from hotelsandbox.core.models import AgentResponse, ConversationMessage
from hotelsandbox.services.shop import ShopService


def create_chat_model(config: SandboxConfig) -> BaseChatModel:
    """Create the chat model named in the configuration.

    Args:
        config: Sandbox configuration

    Returns:
        ChatOpenAI for OpenAI model names, ChatAnthropic otherwise
    """
    if config.is_openai_model:
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=config.model,
            api_key=config.openai_api_key,
            timeout=config.llm_timeout,
            max_retries=0,
        )

    from langchain_anthropic import ChatAnthropic

    return ChatAnthropic(
        model=config.model,
        api_key=config.anthropic_api_key,
        max_tokens=1024,
        timeout=config.llm_timeout,
        max_retries=0,
    )


class ReservationAssistant:
    """Chats with the guest and proposes reservation drafts.

    The assistant only reads shop data; it never books anything.
    """

    def __init__(
        self,
        config: SandboxConfig,
        shop: ShopService,
        chat_model: BaseChatModel | None = None,
    ):
        """Initialize the assistant.

        Args:
            config: Sandbox configuration (model name, keys, timeout)
            shop: Shop service used to enrich drafts
            chat_model: Chat model to use instead of the configured one
        """
        self.config = config
        self.interpreter = ResponseInterpreter(shop)
        self._chat_model = chat_model

    @property
    def chat_model(self) -> BaseChatModel:
        """Get or create the chat model."""
        if self._chat_model is None:
            self._chat_model = create_chat_model(self.config)
        return self._chat_model

    def chat(self, messages: list[ConversationMessage]) -> AgentResponse:
        """Answer the latest turn of a conversation.

        Args:
            messages: Conversation history, oldest first

        Returns:
            AgentResponse; an apology message if the model call fails
        """
        try:
            chain = RESERVATION_AGENT_PROMPT | self.chat_model
            result = chain.invoke({"history": build_history(messages)})
            content = message_text(result)
            logger.debug("Model raw response: {}", content)
        except Exception:
            logger.exception("Error calling the chat model")
            return AgentResponse.plain(APOLOGY_MESSAGE)

        return self.interpreter.interpret(content)


def build_history(messages: list[ConversationMessage]) -> list[BaseMessage]:
    """Map caller messages to LangChain messages; unknown roles become user turns."""
    history: list[BaseMessage] = []
    for message in messages:
        if message.role == "assistant":
            history.append(AIMessage(content=message.content))
        else:
            history.append(HumanMessage(content=message.content))
    return history


def message_text(message: Any) -> str:
    """Return the text of a model reply, joining content blocks if needed."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content

    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
