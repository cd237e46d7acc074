from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

class FunctionDeclaration(BaseModel):
    name: str = Field(..., description="Unique within one completion request")
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})

class FunctionCall(BaseModel):
    name: str
    arguments: str = "{}"

class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant", "function"]
    content: Optional[str] = None
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None

    def to_wire(self) -> dict:
        msg = self.model_dump(exclude_none=True)
        # assistant function calls are sent with an explicit null content
        msg.setdefault("content", None)
        return msg

class Completion(BaseModel):
    message: ChatMessage
    finish_reason: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        return self.message.content

    @property
    def function_call(self) -> Optional[FunctionCall]:
        return self.message.function_call

    @property
    def halt(self) -> bool:
        return self.finish_reason == "stop"

class PlanData(BaseModel):
    steps: List[str]

class AtomicData(BaseModel):
    pass
