from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Sequence

from prompting.core.errors import UnknownToolError
from prompting.llm.schemas import FunctionDeclaration

@dataclass(frozen=True)
class Tool:
    declaration: FunctionDeclaration
    use: Callable[[Dict[str, Any]], Awaitable[str]]

    @property
    def name(self) -> str:
        return self.declaration.name

TOOLS: dict[str, Tool] = {}

def register(declaration: FunctionDeclaration):
    def deco(fn: Callable[[Dict[str, Any]], Awaitable[str]]):
        if declaration.name in TOOLS:
            raise ValueError(f"Tool already registered: {declaration.name}")
        TOOLS[declaration.name] = Tool(declaration=declaration, use=fn)
        return fn
    return deco

def find_tool(tools: Sequence[Tool], name: str) -> Tool:
    tool = next((t for t in tools if t.name == name), None)
    if tool is None:
        raise UnknownToolError(f"Cannot find function {name}. Known: {[t.name for t in tools]}")
    return tool

def get_tool(name: str) -> Tool:
    return find_tool(list(TOOLS.values()), name)

def list_tools() -> list[Tool]:
    return list(TOOLS.values())
