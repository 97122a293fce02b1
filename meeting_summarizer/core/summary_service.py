# meeting_summarizer/core/summary_service.py
import logging
from typing import Optional

from .groq_client import GroqSummarizer, count_tokens

logger = logging.getLogger(__name__)

MAX_OUTPUT_TOKENS = 1500
TEMPERATURE = 0.2  # Lower temperature for more factual outputs
DEFAULT_INSTRUCTION = "Provide a comprehensive summary"

SYSTEM_PROMPT_TEMPLATE = (
    "You are an expert meeting assistant that provides professional summaries.\n"
    "Follow these guidelines:\n"
    "1. Identify key decisions and action items\n"
    "2. Highlight important discussion points\n"
    "3. Maintain neutral, professional tone\n"
    "4. Structure output clearly with headings if needed\n"
    "5. {instruction}"
)


def build_system_prompt(custom_prompt: Optional[str] = None) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(instruction=custom_prompt or DEFAULT_INSTRUCTION)


def build_user_prompt(transcript: str) -> str:
    return f"Meeting Transcript:\n\n{transcript}"


async def create_summary(
    summarizer: GroqSummarizer,
    transcript: str,
    custom_prompt: Optional[str] = None,
) -> str:
    system_prompt = build_system_prompt(custom_prompt)
    prompt = build_user_prompt(transcript)

    prompt_tokens = count_tokens(system_prompt + prompt)
    if prompt_tokens is None:
        logger.info("Summarizing transcript (%d chars) with %s", len(transcript), summarizer.model)
    else:
        logger.info(
            "Summarizing transcript (%d chars, ~%d prompt tokens) with %s",
            len(transcript),
            prompt_tokens,
            summarizer.model,
        )

    return await summarizer.generate(
        system=system_prompt,
        prompt=prompt,
        max_tokens=MAX_OUTPUT_TOKENS,
        temperature=TEMPERATURE,
    )
