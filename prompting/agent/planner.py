"""
Creates the plan for an objective, recursively.
What it does:
- Builds a prompt from the objective and its ancestor objectives
- Asks the model (through create_plan) for steps or an atomic verdict
- Expands every step with a recursive call
- Logs each step list indented by depth

And, the main purpose:
Break an objective down until every piece is atomic.
"""


from typing import List, Sequence, Union

from prompting.agent.capabilities import DATA_ATOMIC, DATA_PLAN
from prompting.agent.evaluator import Evaluator
from prompting.agent.expressions import DataResponse, Prompt
from prompting.core.errors import ProtocolError, UnknownDataTagError
from prompting.core.logging import get_logger
from prompting.llm.prompts import PLAN_NESTED_PROMPT, PLAN_ROOT_PROMPT

log = get_logger("agent.planner")

Step = Union[str, DataResponse]


def build_plan_prompt(objective_stack: Sequence[str], objective: str) -> str:
    if not objective_stack:
        return PLAN_ROOT_PROMPT.format(objective=objective)
    ancestors = "\n".join(f"{i + 1}. {o}" for i, o in enumerate(objective_stack))
    return PLAN_NESTED_PROMPT.format(ancestors=ancestors, objective=objective)


async def make_plan(evaluator: Evaluator, objective_stack: Sequence[str], objective: str) -> List[Step]:
    resp = await evaluator.evaluate(Prompt(build_plan_prompt(objective_stack, objective)))

    value = resp.value
    if not isinstance(value, DataResponse):
        raise ProtocolError(f"Fatal error: unexpected response {value!r}")

    if value.name == DATA_PLAN:
        steps: List[Step] = list(value.data["steps"])
        indent = ">" * len(objective_stack)
        log.info(str([f"{indent} {step}" for step in steps]))

        # sub-plans go on the end of the same list; only the original steps are expanded
        sub_stack = [*objective_stack, objective]
        original = len(steps)
        i = 0
        while i < original:
            steps.extend(await make_plan(evaluator, sub_stack, steps[i]))
            i += 1
        return steps

    if value.name == DATA_ATOMIC:
        return [value]

    raise UnknownDataTagError(f"Fatal error: unknown data name {value.name}")
