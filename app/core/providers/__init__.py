"""
Provider abstraction layer for model-agnostic text generation.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
)

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMResponse",
]
