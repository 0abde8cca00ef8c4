"""
Tests for splitting model completions into message and action.
"""

import json

import pytest

from app.core.agent.action_parser import extract_json_object, parse_completion
from app.types.actions import ActionType


def test_message_and_action_are_split():
    text = 'Let me check your WETH balance.\nACTION: {"type":"CHECK_BALANCE","network":"sepolia","token":"WETH"}'

    parsed = parse_completion(text)

    assert parsed.message == "Let me check your WETH balance."
    assert parsed.action.type == ActionType.CHECK_BALANCE
    assert parsed.action.network == "sepolia"
    assert parsed.action.token == "WETH"


def test_serialized_action_round_trips():
    action = {
        "type": "GET_QUOTE",
        "network": "ethereum",
        "sellToken": "WETH",
        "buyToken": "USDC",
        "amountType": "sell",
        "amount": "0.1",
    }

    parsed = parse_completion("Fetching a quote.\nACTION: " + json.dumps(action))

    assert parsed.message == "Fetching a quote."
    assert parsed.action.to_payload() == action


def test_no_delimiter_returns_trimmed_text_and_no_action():
    parsed = parse_completion("   Hello! How can I help you swap today?  \n")

    assert parsed.message == "Hello! How can I help you swap today?"
    assert parsed.action.type == ActionType.NO_ACTION


@pytest.mark.parametrize(
    "tail",
    [
        "",
        "no json here",
        '{"type": "GET_QUOTE", ',
        "[1, 2, 3]",
        '{"type": "LAUNCH_ROCKET"}',
        '{"network": "ethereum"}',
    ],
)
def test_malformed_action_becomes_no_action(tail):
    parsed = parse_completion(f"Sure.\nACTION: {tail}")

    assert parsed.message == "Sure."
    assert parsed.action.type == ActionType.NO_ACTION


def test_first_delimiter_wins():
    text = (
        'Checking.\nACTION: {"type":"CHECK_BALANCE","token":"DAI"}\n'
        'ACTION: {"type":"SUBMIT_ORDER"}'
    )

    parsed = parse_completion(text)

    assert parsed.action.type == ActionType.CHECK_BALANCE
    assert parsed.action.token == "DAI"


def test_trailing_prose_after_json_is_ignored():
    text = 'Ok.\nACTION: {"type":"REQUEST_WALLET_CONNECT"} Let me know once you are connected {maybe}.'

    parsed = parse_completion(text)

    assert parsed.action.type == ActionType.REQUEST_WALLET_CONNECT


def test_numeric_amount_is_coerced_to_string():
    parsed = parse_completion(
        'Quote.\nACTION: {"type":"GET_QUOTE","network":"ethereum","sellToken":"WETH",'
        '"buyToken":"USDC","amountType":"sell","amount":0.5}'
    )

    assert parsed.action.amount == "0.5"


def test_braces_inside_strings_do_not_close_block():
    text = 'Hi.\nACTION: {"type":"NO_ACTION","note":"a } inside {text}"}'

    assert extract_json_object(text) == '{"type":"NO_ACTION","note":"a } inside {text}"}'
    assert parse_completion(text).action.type == ActionType.NO_ACTION


def test_nested_objects_are_captured_whole():
    assert extract_json_object('x {"a": {"b": 1}, "c": "\\"}"} y') == '{"a": {"b": 1}, "c": "\\"}"}'


def test_unbalanced_block_returns_none():
    assert extract_json_object('{"a": {"b": 1}') is None
