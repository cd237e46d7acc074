from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel

from prompting.llm.prompts import CREATE_PLAN_PROMPT
from prompting.llm.schemas import AtomicData, FunctionDeclaration, PlanData


@dataclass(frozen=True)
class Capability:
    """
    Something the model may ask for by name. Applying it sends
    prompt_gen(arguments) together with helper_functions, a smaller set of
    declarations that push the model towards a structured answer.
    """

    declaration: FunctionDeclaration
    prompt_gen: Callable[[Dict[str, Any]], str]
    helper_functions: List[FunctionDeclaration] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.declaration.name


DATA_PLAN = "__data_plan"
DATA_ATOMIC = "__data_atomic"

# payload schema per known data tag, checked when a completion is decoded
DATA_MODELS: Dict[str, Type[BaseModel]] = {
    DATA_PLAN: PlanData,
    DATA_ATOMIC: AtomicData,
}


def _create_plan_prompt(arguments: Dict[str, Any]) -> str:
    return CREATE_PLAN_PROMPT.format(objective=arguments["objective"])


CREATE_PLAN = Capability(
    declaration=FunctionDeclaration(
        name="create_plan",
        description="Given an objective, create a plan for the objective.",
        parameters={
            "type": "object",
            "properties": {"objective": {"type": "string"}},
            "required": ["objective"],
        },
    ),
    prompt_gen=_create_plan_prompt,
    helper_functions=[
        FunctionDeclaration(
            name=DATA_PLAN,
            description="A plan to fulfill an objective.",
            parameters={
                "type": "object",
                "properties": {"steps": {"type": "array", "items": {"type": "string"}}},
                "required": ["steps"],
            },
        ),
        FunctionDeclaration(
            name=DATA_ATOMIC,
            description="An objective that is too small to further plan.",
            parameters={"type": "object", "properties": {}},
        ),
    ],
)
