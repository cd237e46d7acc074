from __future__ import annotations

import asyncio
import json

import pytest
from pydantic import ValidationError

from conftest import ScriptedGateway, completion
from prompting.agent.capabilities import CREATE_PLAN
from prompting.agent.evaluator import Evaluator
from prompting.agent.expressions import Apply, DataResponse, Prompt, Response, is_data_function
from prompting.core.errors import ProtocolError, UnknownCapabilityError


def _evaluate(gateway: ScriptedGateway, expr) -> Response:
    return asyncio.run(Evaluator(gateway, [CREATE_PLAN]).evaluate(expr))


def test_is_data_function_checks_reserved_prefix() -> None:
    assert is_data_function("__data_plan")
    assert is_data_function("__data_anything")
    assert not is_data_function("create_plan")
    assert not is_data_function("data_plan")


def test_prompt_sends_capability_declarations_and_returns_content() -> None:
    gateway = ScriptedGateway([completion(content="just text")])
    resp = _evaluate(gateway, Prompt("hello"))
    assert resp == Response("just text")
    assert gateway.prompt_calls == [("hello", ["create_plan"])]


def test_response_is_returned_unchanged_without_calls() -> None:
    gateway = ScriptedGateway()
    expr = Response("done")
    assert _evaluate(gateway, expr) is expr
    assert gateway.prompt_calls == []


def test_non_data_function_call_is_applied_with_helper_declarations() -> None:
    gateway = ScriptedGateway(
        [
            completion(call=("create_plan", json.dumps({"objective": "bake bread"}))),
            completion(call=("__data_plan", json.dumps({"steps": ["mix", "bake"]}))),
        ]
    )
    resp = _evaluate(gateway, Prompt("help me bake bread"))

    assert resp.value == DataResponse(name="__data_plan", data={"steps": ["mix", "bake"]})
    assert resp.value.to_dict() == {"meta": "data", "name": "__data_plan", "data": {"steps": ["mix", "bake"]}}
    second_prompt, second_functions = gateway.prompt_calls[1]
    assert second_prompt.startswith("Create a plan to fulfill the following objective: bake bread.")
    assert second_functions == ["__data_plan", "__data_atomic"]


def test_data_function_never_triggers_apply() -> None:
    gateway = ScriptedGateway([completion(call=("__data_custom", json.dumps({"x": 1})))])
    resp = _evaluate(gateway, Prompt("anything"))
    assert resp.value == DataResponse(name="__data_custom", data={"x": 1})
    assert len(gateway.prompt_calls) == 1


def test_completion_without_content_or_call_fails_before_more_calls() -> None:
    gateway = ScriptedGateway([completion(content=None), completion(content="never used")])
    with pytest.raises(ProtocolError):
        _evaluate(gateway, Prompt("hello"))
    assert len(gateway.prompt_calls) == 1


def test_unknown_capability_is_fatal() -> None:
    gateway = ScriptedGateway([completion(call=("book_flight", "{}"))])
    with pytest.raises(UnknownCapabilityError):
        _evaluate(gateway, Prompt("fly me somewhere"))
    assert len(gateway.prompt_calls) == 1


def test_apply_of_unregistered_name_is_fatal() -> None:
    with pytest.raises(UnknownCapabilityError):
        _evaluate(ScriptedGateway(), Apply("nope", {}))


def test_plan_payload_is_validated() -> None:
    gateway = ScriptedGateway([completion(call=("__data_plan", json.dumps({"steps": "not a list"})))])
    with pytest.raises(ValidationError):
        _evaluate(gateway, Prompt("plan"))


def test_malformed_arguments_propagate() -> None:
    gateway = ScriptedGateway([completion(call=("__data_plan", "{not json"))])
    with pytest.raises(json.JSONDecodeError):
        _evaluate(gateway, Prompt("plan"))


def test_duplicate_capabilities_are_rejected() -> None:
    with pytest.raises(ValueError):
        Evaluator(ScriptedGateway(), [CREATE_PLAN, CREATE_PLAN])


def test_empty_arguments_string_propagates_decode_error() -> None:
    gateway = ScriptedGateway([completion(call=("__data_atomic", ""))])
    with pytest.raises(json.JSONDecodeError):
        _evaluate(gateway, Prompt("tie shoes"))
