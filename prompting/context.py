from dataclasses import dataclass, field

import httpx

from prompting.agent.operator import ConsoleOperator
from prompting.core.config import Settings, load_settings
from prompting.core.logging import set_level
from prompting.llm.gateway import CompletionGateway


@dataclass
class AppContext:
    """Everything a run needs, built once at startup and passed down."""

    settings: Settings
    gateway: CompletionGateway
    operator: ConsoleOperator = field(default_factory=ConsoleOperator)


def build_context(
    settings: Settings | None = None,
    *,
    operator: ConsoleOperator | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    settings = settings or load_settings()
    set_level(settings.LOG_LEVEL.upper())
    return AppContext(
        settings=settings,
        gateway=CompletionGateway(settings, transport=transport),
        operator=operator or ConsoleOperator(),
    )
