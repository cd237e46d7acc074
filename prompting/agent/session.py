"""
Runs one interactive Thought/Action/Observation session.
What it does:
- Seeds the transcript with the system protocol prompt and one user message
- Sends the whole transcript plus tool declarations each turn
- Executes the tool the model asks for and appends its observation
- Stops when the model finishes without asking for a tool

And, the main purpose:
Let the model answer a question using registered tools.
"""


import json
from typing import List, Sequence

from prompting.agent.operator import ConsoleOperator
from prompting.core.logging import get_logger
from prompting.llm.prompts import REACT_SYSTEM
from prompting.llm.schemas import ChatMessage
from prompting.tools.registry import Tool, find_tool

log = get_logger("agent.session")


class ToolSession:
    def __init__(self, gateway, operator: ConsoleOperator, tools: Sequence[Tool]):
        self.gateway = gateway
        self.operator = operator
        self.tools = list(tools)
        self.transcript: List[ChatMessage] = [ChatMessage(role="system", content=REACT_SYSTEM)]

    async def start(self) -> None:
        answer = await self.operator.ask("User: ")
        self.transcript.append(ChatMessage(role="user", content=answer))

    async def turn(self) -> bool:
        """One model round trip. Returns False once the session is over."""
        completion = await self.gateway.complete(self.transcript, [t.declaration for t in self.tools])
        message = completion.message
        self.transcript.append(message)

        if message.content:
            self.operator.say(f"Assistant: {message.content}")

        call = message.function_call
        if call is None:
            return not completion.halt

        self.operator.say(f"[{call.name}]: {call.arguments}")
        tool = find_tool(self.tools, call.name)
        arguments = json.loads(call.arguments)
        result = await tool.use(arguments)
        self.operator.say(f"Observation: {result}")
        self.transcript.append(ChatMessage(role="function", name=tool.name, content=result))
        return True

    async def run(self) -> List[ChatMessage]:
        await self.start()
        turns = 0
        while await self.turn():
            turns += 1
        log.info(f"session finished after {turns + 1} turns, transcript={len(self.transcript)} messages")
        self.operator.say("End session.")
        return self.transcript
