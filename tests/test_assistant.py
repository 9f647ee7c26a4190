from __future__ import annotations

import asyncio

from fakes import FakeAssistant

from craftref.core.assistant import ASSISTANT_EMPTY, ASSISTANT_FAILURE, ask, build_prompt


def test_prompt_carries_edition_context() -> None:
    prompt = build_prompt("  how to fly? ", "java", "pc/1.20.1")

    assert "java 1.20.1 (pc/1.20.1)" in prompt
    assert "how to fly?." in prompt


def test_blank_question_skips_the_call() -> None:
    assistant = FakeAssistant("unused")

    assert asyncio.run(ask(assistant, "   ", "java", "pc/1.21")) is None
    assert assistant.prompts == []


def test_answer_is_returned() -> None:
    assistant = FakeAssistant("Use /gamemode creative\n")

    answer = asyncio.run(ask(assistant, "creative mode?", "bedrock", "bedrock/1.21.0"))

    assert answer == "Use /gamemode creative"
    assert len(assistant.prompts) == 1


def test_failure_and_empty_answers_map_to_sentinels() -> None:
    assert asyncio.run(ask(FakeAssistant(None), "q", "java", "pc/1.21")) == ASSISTANT_FAILURE
    assert asyncio.run(ask(FakeAssistant("  "), "q", "java", "pc/1.21")) == ASSISTANT_EMPTY
