from prompting.llm.schemas import FunctionDeclaration
from prompting.tools.registry import register


"""
Search tool.

What it does:
- Accepts a search query from the model
- Returns a fixed observation
Main purpose:
Placeholder for a real search engine integration.
"""

CANNED_RESULT = "Lebron James has played for the Cavaliers, Heat, and the Lakers."

@register(
    FunctionDeclaration(
        name="google",
        description="Query the Google search engine",
        parameters={
            "type": "object",
            "properties": {"query": {"type": "string"}},
            "required": ["query"],
        },
    )
)
async def google(arguments: dict) -> str:
    return CANNED_RESULT
