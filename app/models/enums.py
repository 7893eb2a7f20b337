"""
Enums for type-safe values across the application.
"""
from enum import Enum
from typing import Optional


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Gemini/Groq compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    OPENAI = "openai"
    GROQ = "groq"
    GEMINI = "gemini"


class SummaryMode(str, Enum):
    """Summary style requested by the client."""
    BRIEF = "brief"
    DETAILED = "detailed"
    BULLET = "bullet"
    ELI5 = "eli5"
    ACADEMIC = "academic"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SummaryMode":
        """Resolve a raw ``summaryType`` value. Unknown or empty values select BRIEF."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.BRIEF
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.BRIEF


class ContentSource(str, Enum):
    """Provenance of generated content."""
    GENERATED = "generated"
    FALLBACK = "fallback"
