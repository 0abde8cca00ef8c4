"""
Split a model completion into the user-facing message and its action.

The completion is free text, then the first ``ACTION:`` marker, then a JSON
object. Anything after the first balanced object is ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import structlog
from pydantic import ValidationError

from ...types.actions import ActionType, AgentAction
from .prompts import ACTION_DELIMITER

logger = structlog.stdlib.get_logger(__name__)


@dataclass
class ParsedCompletion:
    message: str
    action: AgentAction


def _no_action() -> AgentAction:
    return AgentAction(type=ActionType.NO_ACTION)


def extract_json_object(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` block in ``text``.

    Braces inside JSON string literals are not counted.
    """

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def parse_completion(text: str) -> ParsedCompletion:
    head, marker, tail = (text or "").partition(ACTION_DELIMITER)
    message = head.strip()
    if not marker:
        return ParsedCompletion(message=message, action=_no_action())

    block = extract_json_object(tail)
    if block is None:
        logger.warning("action_block_missing", tail=tail[:200])
        return ParsedCompletion(message=message, action=_no_action())

    try:
        payload = json.loads(block)
    except json.JSONDecodeError as exc:
        logger.warning("action_json_invalid", error=str(exc), block=block[:200])
        return ParsedCompletion(message=message, action=_no_action())

    if not isinstance(payload, dict):
        logger.warning("action_not_object", block=block[:200])
        return ParsedCompletion(message=message, action=_no_action())

    try:
        action = AgentAction.model_validate(payload)
    except ValidationError as exc:
        logger.warning("action_rejected", error=str(exc), action_type=payload.get("type"))
        return ParsedCompletion(message=message, action=_no_action())

    return ParsedCompletion(message=message, action=action)


__all__ = ["ParsedCompletion", "extract_json_object", "parse_completion"]
