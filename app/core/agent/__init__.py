"""
AlphaSwap chat agent

Intent parsing with the LLM, the ``ACTION:`` completion format, action
validation and the dispatcher that turns actions into chat responses.
"""

from .action_parser import ParsedCompletion, parse_completion
from .dispatcher import ActionDispatcher
from .intent_parser import IntentParser, IntentParserError
from .validator import ValidationResult, validate_action

__all__ = [
    "ActionDispatcher",
    "IntentParser",
    "IntentParserError",
    "ParsedCompletion",
    "ValidationResult",
    "parse_completion",
    "validate_action",
]
