#!/usr/bin/env python3
"""
Example: Resolving design tokens.

This demonstrates how themes provide named token namespaces and how the
resolver substitutes '@token' references in style objects, including
gradient colour stops.

Usage:
    python examples/use_tokens.py
"""

from pathlib import Path

from chuk_mcp_design_tokens.themes import ThemeLoader
from chuk_mcp_design_tokens.tokens import CyclicTokenReferenceError, DesignTokenResolver


def main() -> None:
    """Demonstrate the design token system."""
    print("CHUK Design Token Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_design_tokens/themes/library"
    loader = ThemeLoader(library_path=library_path)

    print("Available themes:")
    for meta in loader.list_themes():
        print(f"  {meta.name}: {meta.description}")
        print(f"    {meta.token_count} tokens in {', '.join(meta.categories)}")
    print()

    light = loader.get_theme("light")
    if not light:
        print("Failed to load theme")
        return

    resolver = DesignTokenResolver(light.tokens)

    style = {
        "fill": {
            "type": "linear",
            "colorStops": [
                {"offset": 0, "color": "@primary"},
                {"offset": 1, "color": "@primary-active"},
            ],
        },
        "stroke": "@border",
        "lineWidth": 1,
    }

    print("Style with tokens:")
    print(f"  {style}")
    print()
    print("Resolved (light):")
    print(f"  {resolver.get_paint_style(style)}")
    print()

    dark = loader.get_theme("dark")
    if dark:
        resolver.register_tokens(dark.tokens)
        print("Resolved (dark):")
        print(f"  {resolver.get_paint_style(style)}")
        print()

    print("Unknown tokens pass through:")
    print(f"  @missing -> {resolver.get_token_value('@missing')}")
    print()

    print("Reference cycles are rejected:")
    try:
        resolver.register_tokens({"colors": {"a": "@b", "b": "@a"}})
    except CyclicTokenReferenceError as e:
        print(f"  {e}")
    print(f"  Previous theme still active: @text -> {resolver.get_token_value('@text')}")


if __name__ == "__main__":
    main()
