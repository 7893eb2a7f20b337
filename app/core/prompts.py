"""
Centralized configuration for LLM Prompts.

This module contains all system instructions and prompt templates used across the application.
Prompts are grouped by domain (Service) for better discoverability and context.
"""
from pydantic import BaseModel, ConfigDict

from app.models.enums import SummaryMode


class SummaryTemplate(BaseModel):
    """Instruction and output budget for one summary mode."""

    instruction: str
    max_tokens: int

    model_config = ConfigDict(frozen=True)


class SummaryPrompts:
    """System prompts for the Summary Generator, one per SummaryMode."""

    BRIEF = """You are an expert at summarizing YouTube videos concisely and clearly.
Summarize the following video transcript, keeping only the essential content.
Structure your response as:
1. Main topic of the video (1-2 lines)
2. Key points (3-5 bullet points starting with "- ")
3. Main conclusion or insight (1-2 lines)"""

    DETAILED = """You are an expert at producing detailed summaries of YouTube videos.
Analyze the following video transcript and provide a comprehensive summary.
Structure your response as:
1. Video overview (2-3 lines)
2. Detailed summary of each major section (2-3 paragraphs per section)
3. Key insights and background information (3-5 items)
4. Explanation of technical terms (if needed)
5. Conclusion and what it means for the viewer (3-4 lines)"""

    BULLET = """You are an expert at extracting the key points of YouTube videos.
Read the following video transcript and list its important points in the order they appear in the video.
Write each point as a single bullet starting with "- ".
Keep every bullet to one or two sentences and do not add an introduction or conclusion."""

    ELI5 = """You are a friendly teacher who explains things so that a five-year-old could understand.
Explain what the following video is about using very simple words, short sentences and everyday examples.
Avoid jargon. If a difficult idea is unavoidable, explain it with a comparison to something familiar.
End with one sentence describing the most important thing to remember."""

    ACADEMIC = """You are a scholar writing an academic analysis of a video lecture or presentation.
Analyze the following video transcript and structure your response as:
1. Abstract (3-4 sentences)
2. Central thesis and arguments
3. Methodology or evidence presented
4. Critical evaluation (strengths, limitations, open questions)
5. Relation to the wider field
6. Conclusion
Use precise, formal language."""

    _TEMPLATES: dict[SummaryMode, SummaryTemplate] = {
        SummaryMode.BRIEF: SummaryTemplate(instruction=BRIEF, max_tokens=500),
        SummaryMode.DETAILED: SummaryTemplate(instruction=DETAILED, max_tokens=1000),
        SummaryMode.BULLET: SummaryTemplate(instruction=BULLET, max_tokens=800),
        SummaryMode.ELI5: SummaryTemplate(instruction=ELI5, max_tokens=600),
        SummaryMode.ACADEMIC: SummaryTemplate(instruction=ACADEMIC, max_tokens=1200),
    }

    @classmethod
    def for_mode(cls, mode: SummaryMode | str | None) -> SummaryTemplate:
        """Return the template for a mode. Unknown modes get the BRIEF template."""
        return cls._TEMPLATES.get(SummaryMode.parse(mode), cls._TEMPLATES[SummaryMode.BRIEF])

    @staticmethod
    def user_message(title: str, transcript: str) -> str:
        return f"Video Title: {title}\n\nTranscript:\n{transcript}"


class TimelinePrompts:
    """System prompts for the Timeline Generator."""

    SYSTEM_INSTRUCTIONS = """You are an expert at splitting YouTube videos into chapters.
From the video transcript, produce exactly {count} chapters in chronological order.
Respond ONLY with a JSON object of this exact shape:
{{"timeline": [{{"time": "mm:ss", "title": "short chapter title", "description": "one sentence describing the chapter"}}]}}
Rules:
- "time" is the chapter start as minutes:seconds, for example "03:25". Minutes may exceed 59 for long videos.
- The first chapter starts at "00:00".
- Keep titles under 8 words."""

    @classmethod
    def system_instructions(cls, count: int) -> str:
        return cls.SYSTEM_INSTRUCTIONS.format(count=count)

    @staticmethod
    def user_message(title: str, transcript: str) -> str:
        return f"Video Title: {title}\n\nTranscript:\n{transcript}"
