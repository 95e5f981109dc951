"""
Pydantic models for the design token system.

This module provides:
- Theme: Named token namespace
- ThemeMetadata: Listing summary of a theme
"""

from chuk_mcp_design_tokens.models.theme import Theme, ThemeMetadata

__all__ = [
    "Theme",
    "ThemeMetadata",
]
