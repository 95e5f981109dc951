"""
Theme system - named design token namespaces stored as YAML.
"""

from chuk_mcp_design_tokens.themes.loader import ThemeLoader

__all__ = [
    "ThemeLoader",
]
