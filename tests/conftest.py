from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Sequence

import pytest


# Ensure `import prompting...` works when running `pytest` from repo root.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from prompting.llm.schemas import ChatMessage, Completion, FunctionDeclaration  # noqa: E402


def completion(
    *,
    content: str | None = None,
    call: tuple[str, str] | None = None,
    finish_reason: str | None = None,
) -> Completion:
    message: dict[str, Any] = {"role": "assistant", "content": content}
    if call is not None:
        message["function_call"] = {"name": call[0], "arguments": call[1]}
    if finish_reason is None:
        finish_reason = "function_call" if call is not None else "stop"
    return Completion.model_validate({"message": message, "finish_reason": finish_reason})


class ScriptedGateway:
    """Answers from a fixed script and records every request."""

    def __init__(self, script: Sequence[Completion] | None = None, *, by_prompt=None) -> None:
        self.script = list(script or [])
        self.by_prompt = by_prompt
        self.prompt_calls: list[tuple[str, list[str]]] = []
        self.chat_calls: list[tuple[int, list[str]]] = []

    def _next(self) -> Completion:
        if not self.script:
            raise AssertionError("gateway called more often than scripted")
        return self.script.pop(0)

    async def complete_prompt(self, prompt: str, functions: Sequence[FunctionDeclaration]) -> Completion:
        self.prompt_calls.append((prompt, [f.name for f in functions]))
        if self.by_prompt is not None:
            return self.by_prompt(prompt, functions)
        return self._next()

    async def complete(self, messages: Sequence[ChatMessage], functions: Sequence[FunctionDeclaration]) -> Completion:
        self.chat_calls.append((len(messages), [f.name for f in functions]))
        return self._next()


class ScriptedOperator:
    def __init__(self, answers: Sequence[str]) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []
        self.lines: list[str] = []

    async def ask(self, prompt: str) -> str:
        self.asked.append(prompt)
        return self.answers.pop(0)

    def say(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture
def operator() -> ScriptedOperator:
    return ScriptedOperator(["Which teams has Lebron James played for?"])
