"""
Design token resolution.

Tokens are named, themeable values grouped into categories. Style values
refer to them with an '@' prefix and the resolver substitutes the
concrete value at paint time.
"""

from chuk_mcp_design_tokens.tokens.resolver import (
    CyclicTokenReferenceError,
    DesignTokenResolver,
    TokenNamespace,
    TokenValue,
    is_token_reference,
)

__all__ = [
    "CyclicTokenReferenceError",
    "DesignTokenResolver",
    "TokenNamespace",
    "TokenValue",
    "is_token_reference",
]
