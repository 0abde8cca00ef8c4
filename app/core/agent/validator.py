"""Structural checks on a parsed action before it is dispatched."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ...types.actions import ActionType, AgentAction
from ..chains import SUPPORTED_NETWORKS


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


Rule = Tuple[Callable[[AgentAction], bool], str]


def _network_allowed(action: AgentAction) -> bool:
    return action.network in SUPPORTED_NETWORKS


def _network_absent_or_allowed(action: AgentAction) -> bool:
    return not action.network or action.network in SUPPORTED_NETWORKS


# Checked in order; the first failing rule names the error.
REQUIRED_FIELDS: Dict[ActionType, List[Rule]] = {
    ActionType.GET_QUOTE: [
        (_network_allowed, "Invalid or missing network"),
        (lambda a: bool(a.sellToken and a.buyToken), "Missing token addresses"),
        (lambda a: bool(a.amount and a.amountType), "Missing amount or amountType"),
    ],
    ActionType.SUBMIT_ORDER: [
        (_network_absent_or_allowed, "Invalid network"),
    ],
    ActionType.CHECK_BALANCE: [
        (lambda a: bool(a.token or a.tokens), "Missing token or tokens for balance check"),
    ],
}


def validate_action(action: AgentAction) -> ValidationResult:
    for check, error in REQUIRED_FIELDS.get(action.type, []):
        if not check(action):
            return ValidationResult(valid=False, error=error)
    return ValidationResult(valid=True)


__all__ = ["REQUIRED_FIELDS", "ValidationResult", "validate_action"]
