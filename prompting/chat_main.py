import asyncio

import prompting.tools.google  # noqa: F401
from prompting.agent.session import ToolSession
from prompting.context import AppContext, build_context
from prompting.core.logging import get_logger
from prompting.tools.registry import list_tools

log = get_logger("agent.session")


async def run(ctx: AppContext):
    session = ToolSession(ctx.gateway, ctx.operator, list_tools())
    return await session.run()


def main() -> None:
    ctx = build_context()
    try:
        asyncio.run(run(ctx))
    except Exception as e:
        log.error(f"session failed: {e}")
        raise


if __name__ == "__main__":
    main()
