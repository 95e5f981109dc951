"""
MCP tool implementations.

Tools are organized by domain:
- tokens - Theme discovery, token registration and resolution
"""

from chuk_mcp_design_tokens.tools.tokens import register_token_tools

__all__ = [
    "register_token_tools",
]
