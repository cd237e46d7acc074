import asyncio
import sys

from prompting.agent.capabilities import CREATE_PLAN
from prompting.agent.evaluator import Evaluator
from prompting.agent.expressions import DataResponse
from prompting.agent.planner import make_plan
from prompting.context import AppContext, build_context
from prompting.core.logging import get_logger

log = get_logger("agent.planner")

DEFAULT_OBJECTIVE = "plan a wedding"


async def run(ctx: AppContext, objective: str) -> list:
    evaluator = Evaluator(ctx.gateway, [CREATE_PLAN])
    plan = await make_plan(evaluator, [], objective)
    ctx.operator.say(str([s.to_dict() if isinstance(s, DataResponse) else s for s in plan]))
    return plan


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    objective = " ".join(argv).strip() or DEFAULT_OBJECTIVE
    ctx = build_context()
    try:
        asyncio.run(run(ctx, objective))
    except Exception as e:
        log.error(f"planning failed: {e}")
        raise


if __name__ == "__main__":
    main()
