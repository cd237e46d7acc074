"""
The three expression forms the evaluator works on.
What they are:
- Prompt: raw text to send to the model
- Apply: a named capability with its arguments
- Response: a terminal value (plain text or structured data)

And, the main purpose:
Represent one pending unit of work between model round trips.
"""


from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Union

DATA_FUNC_PREFIX = "__data_"


def is_data_function(name: str) -> bool:
    return name.startswith(DATA_FUNC_PREFIX)


@dataclass(frozen=True)
class DataResponse:
    name: str
    data: Dict[str, Any] = field(default_factory=dict)
    meta: Literal["data"] = "data"

    def to_dict(self) -> Dict[str, Any]:
        return {"meta": self.meta, "name": self.name, "data": self.data}


@dataclass(frozen=True)
class Prompt:
    text: str


@dataclass(frozen=True)
class Apply:
    function_name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Response:
    value: Union[str, DataResponse]


Expression = Union[Prompt, Apply, Response]
