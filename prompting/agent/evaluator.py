"""
Turns a prompt or a capability call into a terminal response.
What it does:
- Sends prompts to the model with the advertised capability declarations
- Applies a capability with its own prompt and helper declarations
- Decodes every completion into the next expression
- Validates structured data payloads against their schema

And, the main purpose:
Drive model round trips until a Response comes back.
"""


import json
from typing import Dict, Iterable

from prompting.agent.capabilities import DATA_MODELS, Capability
from prompting.agent.expressions import Apply, DataResponse, Expression, Prompt, Response, is_data_function
from prompting.core.errors import ProtocolError, UnknownCapabilityError
from prompting.core.logging import get_logger
from prompting.llm.schemas import Completion

log = get_logger("agent.evaluator")


def _decode_data(name: str, arguments: dict) -> dict:
    model = DATA_MODELS.get(name)
    if model is None:
        return arguments
    return model.model_validate(arguments).model_dump()


class Evaluator:
    def __init__(self, gateway, capabilities: Iterable[Capability]):
        self.gateway = gateway
        self.capabilities: Dict[str, Capability] = {}
        for cap in capabilities:
            if cap.name in self.capabilities:
                raise ValueError(f"Capability already registered: {cap.name}")
            self.capabilities[cap.name] = cap

    @property
    def declarations(self):
        return [cap.declaration for cap in self.capabilities.values()]

    def get_capability(self, name: str) -> Capability:
        if name not in self.capabilities:
            raise UnknownCapabilityError(
                f"Unknown capability: {name}. Known: {list(self.capabilities.keys())}"
            )
        return self.capabilities[name]

    async def evaluate(self, expr: Expression) -> Response:
        log.info(f"eval: {expr}")

        if isinstance(expr, Prompt):
            completion = await self.gateway.complete_prompt(expr.text, self.declarations)
            return await self.deserialize(completion)

        if isinstance(expr, Apply):
            cap = self.get_capability(expr.function_name)
            completion = await self.gateway.complete_prompt(
                cap.prompt_gen(expr.arguments),
                cap.helper_functions,
            )
            return await self.deserialize(completion)

        if isinstance(expr, Response):
            return expr

        raise TypeError(f"Not an expression: {expr!r}")

    async def deserialize(self, completion: Completion) -> Response:
        """
        Function call with a data name -> structured Response.
        Function call with any other name -> evaluate it as a new Apply.
        Plain content -> text Response.
        Neither -> ProtocolError.
        """
        call = completion.function_call
        if call is not None:
            arguments = json.loads(call.arguments)
            if is_data_function(call.name):
                return Response(DataResponse(name=call.name, data=_decode_data(call.name, arguments)))
            return await self.evaluate(Apply(call.name, arguments))

        if completion.content:
            return Response(completion.content)

        raise ProtocolError(
            f"Fatal error: do not know how to handle completion. {completion.model_dump_json()}"
        )
