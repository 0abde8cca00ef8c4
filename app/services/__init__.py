"""Service layer helpers"""

from .token_resolution import STATIC_TOKEN_ADDRESSES, TokenResolver, is_valid_address
from .token_store import TokenStore
from .units import format_units, parse_units

__all__ = [
    "STATIC_TOKEN_ADDRESSES",
    "TokenResolver",
    "TokenStore",
    "format_units",
    "is_valid_address",
    "parse_units",
]
