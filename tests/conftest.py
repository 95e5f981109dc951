"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_design_tokens.tokens import DesignTokenResolver


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def themes_library_path() -> Path:
    """Path to the built-in theme library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_design_tokens" / "themes" / "library"


@pytest.fixture
def sample_tokens() -> dict:
    """A namespace with cross-category references."""
    return {
        "palette": {
            "blue-500": "#1677FF",
            "gray-900": "#1F1F1F",
        },
        "colors": {
            "primary": "@blue-500",
            "text": "@gray-900",
            "link": "@primary",
        },
        "spacing": {
            "md": 16,
            "gutter": "@md",
        },
    }


@pytest.fixture
def resolver(sample_tokens: dict) -> DesignTokenResolver:
    """Resolver with the sample namespace registered."""
    resolver = DesignTokenResolver()
    resolver.register_tokens(sample_tokens)
    return resolver
