"""AI question answering call-through.

The assistant is an opaque text service; the core only builds the prompt and
maps failures onto fixed user-facing messages. No retry, no caching.
"""

from __future__ import annotations

import logging
from typing import Optional

from craftref.core.errors import AssistantError
from craftref.core.locator import version_label
from craftref.core.ports import AssistantPort

LOGGER = logging.getLogger(__name__)

ASSISTANT_FAILURE = "Generation failed."
ASSISTANT_EMPTY = "Unable to generate content."


def build_prompt(question: str, platform: str, version_token: str) -> str:
    label = version_label(platform, version_token) or version_token
    return (
        "You are a Minecraft expert. "
        f"The current edition is {platform} {label} ({version_token}). "
        f"The user asks: {question.strip()}. "
        "Answer in the user's language and include example commands."
    )


async def ask(
    assistant: AssistantPort,
    question: str,
    platform: str,
    version_token: str,
) -> Optional[str]:
    """Return the assistant answer, a failure sentinel, or None for a blank question."""

    if not question.strip():
        return None
    prompt = build_prompt(question, platform, version_token)
    try:
        answer = await assistant.generate(prompt)
    except AssistantError as exc:
        LOGGER.warning("Assistant call failed: %s", exc)
        return ASSISTANT_FAILURE
    return answer.strip() or ASSISTANT_EMPTY
