"""
OpenAI implementation of LLMProvider.
"""
from typing import Optional

from loguru import logger
from openai import AsyncOpenAI

from app.core.providers.llm_provider import LLMProvider, LLMMessage, LLMResponse


class OpenAIProvider(LLMProvider):
    """
    OpenAI chat-completions implementation of LLMProvider.

    Example:
        provider = OpenAIProvider(
            api_key="your-api-key",
            model_name="gpt-3.5-turbo",
        )
        response = await provider.generate_text(messages)
    """

    def __init__(self, api_key: str, model_name: str = "gpt-3.5-turbo"):
        """
        Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key.
            model_name: Chat model to use.
        """
        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate text completion using OpenAI."""
        openai_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        extra = {}
        if json_mode:
            extra["response_format"] = {"type": "json_object"}
        if max_tokens is not None:
            extra["max_tokens"] = max_tokens

        logger.debug(f"Sending request to OpenAI ({self.model_name}, json_mode={json_mode})")
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=openai_messages,
            temperature=temperature,
            **extra,
        )

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.debug(f"OpenAI token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
