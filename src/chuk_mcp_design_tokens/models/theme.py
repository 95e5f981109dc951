"""
Theme models - named token namespaces.

A theme bundles design tokens by category (colors, spacing, ...).
Values are concrete (strings or numbers) or '@name' references to
other tokens in the same theme.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_design_tokens.tokens.resolver import TokenValue


class Theme(BaseModel):
    """
    A design token theme.

    The token namespace maps category names to token mappings. Category
    names only organise the table; token names are what styles refer to.
    """

    # Metadata
    schema_version: str = Field("theme/v1", alias="schema")
    name: str = Field(..., description="Theme name")
    description: str = Field("", description="Theme description")

    # Token namespace
    tokens: dict[str, dict[str, TokenValue]] = Field(
        default_factory=dict,
        description="Category name -> token name -> value or '@reference'",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def category_names(self) -> list[str]:
        """Get the category names in definition order."""
        return list(self.tokens)

    def token_count(self) -> int:
        """Count token definitions across all categories."""
        return sum(len(category) for category in self.tokens.values())

    def find_token(self, name: str) -> TokenValue | None:
        """Get the raw value of a token from the first category defining it."""
        for category in self.tokens.values():
            if name in category:
                return category[name]
        return None

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "tokens": {category: dict(values) for category, values in self.tokens.items()},
        }


class ThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    name: str
    description: str
    categories: tuple[str, ...]
    token_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_theme(cls, theme: Theme) -> ThemeMetadata:
        """Create metadata from a theme."""
        return cls(
            name=theme.name,
            description=theme.description,
            categories=tuple(theme.category_names()),
            token_count=theme.token_count(),
        )
