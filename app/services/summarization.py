"""
Summary generation for a single video transcript.

The SummarizationService selects the instruction template and output budget
for the requested SummaryMode and performs one text-generation call. Any
failure is raised as SummaryGenerationError so the orchestrator can fall back
to templated content.
"""
import asyncio
from typing import Optional

from loguru import logger

from app.core.constants import GenerationConfig
from app.core.exceptions import SummaryGenerationError
from app.core.prompts import SummaryPrompts
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.models import LLMRole, SummaryMode


class SummarizationService:
    """
    Generates prose summaries with an injected LLM provider.

    Attributes:
        default_timeout: Seconds a generation call may take when the caller
            does not pass its own timeout.
    """

    def __init__(self, llm_provider: LLMProvider, default_timeout: float = 45.0):
        """
        Initialize the summarization service.

        Args:
            llm_provider: LLM provider for text generation.
            default_timeout: Per-call timeout in seconds.
        """
        self.llm_provider = llm_provider
        self.default_timeout = default_timeout

    async def generate_summary(
        self,
        transcript: str,
        title: str,
        mode: SummaryMode | str | None = SummaryMode.BRIEF,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Generate a summary of the transcript in the requested style.

        Args:
            transcript: Full transcript text.
            title: Video title, included in the prompt.
            mode: Summary style. Unknown values use the brief template.
            timeout: Seconds to wait for the provider (defaults to default_timeout).

        Returns:
            The generated summary text.

        Raises:
            SummaryGenerationError: The call failed, timed out or returned no content.
        """
        summary_mode = SummaryMode.parse(mode)
        template = SummaryPrompts.for_mode(summary_mode)
        limit = timeout if timeout is not None else self.default_timeout

        messages = [
            LLMMessage(role=LLMRole.SYSTEM, content=template.instruction),
            LLMMessage(role=LLMRole.USER, content=SummaryPrompts.user_message(title, transcript)),
        ]

        logger.info(
            f"Generating {summary_mode.value} summary for '{title}' "
            f"({len(transcript)} chars, max_tokens={template.max_tokens})"
        )

        try:
            response = await asyncio.wait_for(
                self.llm_provider.generate_text(
                    messages=messages,
                    temperature=GenerationConfig.TEMPERATURE,
                    max_tokens=template.max_tokens,
                ),
                timeout=limit,
            )
        except asyncio.TimeoutError as e:
            raise SummaryGenerationError(f"Summary generation timed out after {limit}s") from e
        except Exception as e:
            raise SummaryGenerationError(f"Summary generation failed: {e}") from e

        content = (response.content or "").strip()
        if not content:
            raise SummaryGenerationError("Summary generation returned no content")

        return content
