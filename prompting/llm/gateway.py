"""
LLM call wrapper and it does:
- Sends a transcript plus function declarations to the chat completions API
- Returns the first choice as a Completion (content or function call)
- Reports whether the model asked to stop

Main purpose:
Central interface for all model calls.
"""


from typing import Sequence

import httpx

from prompting.core.config import Settings
from prompting.core.logging import get_logger
from prompting.llm.schemas import ChatMessage, Completion, FunctionDeclaration

log = get_logger("llm.gateway")


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


class CompletionGateway:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.model = settings.LLM_MODEL
        self._transport = transport

    def _payload(self, messages: Sequence[ChatMessage], functions: Sequence[FunctionDeclaration]) -> dict:
        payload = {
            "model": self.model,
            "messages": [m.to_wire() for m in messages],
        }
        # the API rejects an empty functions list
        if functions:
            payload["functions"] = [f.model_dump() for f in functions]
        return payload

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        functions: Sequence[FunctionDeclaration],
    ) -> Completion:
        """
        One round trip. Transport failures and non-2xx statuses are raised
        as httpx errors; nothing is retried here.
        """
        url = f"{self.settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions"
        headers = {"Authorization": f"Bearer {self.settings.OPENAI_KEY}"}
        payload = self._payload(messages, functions)
        timeout = httpx.Timeout(self.settings.LLM_TIMEOUT_SECONDS, connect=10.0)

        log.debug(f"request: {_safe_snippet(str(payload), 2000)}")
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            r = await client.post(url, headers=headers, json=payload)
        r.raise_for_status()

        data = r.json()
        log.debug(f"response: {_safe_snippet(r.text, 2000)}")
        choice = data["choices"][0]
        completion = Completion.model_validate(
            {"message": choice["message"], "finish_reason": choice.get("finish_reason")}
        )
        log.info(f"model={self.model} finish_reason={completion.finish_reason}")
        return completion

    async def complete_prompt(self, prompt: str, functions: Sequence[FunctionDeclaration]) -> Completion:
        return await self.complete([ChatMessage(role="user", content=prompt)], functions)
