"""
Token tools - MCP tools for theme discovery and token resolution.

Tools for listing themes, registering token namespaces and resolving
token references in colours and style objects.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design_tokens.constants import ErrorMessages, SuccessMessages
from chuk_mcp_design_tokens.themes import ThemeLoader
from chuk_mcp_design_tokens.tokens import DesignTokenResolver, is_token_reference

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _parse_json_value(text: str) -> Any:
    """Parse a JSON argument, treating non-JSON text as a plain string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_token_tools(
    mcp: ChukMCPServer,
    resolver: DesignTokenResolver,
    theme_loader: ThemeLoader,
) -> dict[str, Any]:
    """
    Register design token tools with the MCP server.

    Args:
        mcp: The MCP server instance
        resolver: The token resolver the tools operate on
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_themes() -> str:
        """
        List available themes.

        Returns all themes from the library and project with
        basic metadata.

        Returns:
            JSON string with list of theme summaries

        Example:
            tokens_list_themes()
        """
        try:
            themes = theme_loader.list_themes()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "name": t.name,
                            "description": t.description,
                            "categories": list(t.categories),
                            "token_count": t.token_count,
                        }
                        for t in themes
                    ],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return _error(str(e))

    tools["tokens_list_themes"] = tokens_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_theme(name: str) -> str:
        """
        Get detailed information about a theme.

        Returns the theme's categories and raw token definitions.

        Args:
            name: Theme name

        Returns:
            JSON string with theme details

        Example:
            tokens_describe_theme(name="light")
        """
        try:
            theme = theme_loader.get_theme(name)
            if theme is None:
                return _error(ErrorMessages.THEME_NOT_FOUND.format(name=name))

            return json.dumps(
                {
                    "status": "success",
                    "theme": {
                        "name": theme.name,
                        "description": theme.description,
                        "categories": {
                            category: len(values) for category, values in theme.tokens.items()
                        },
                        "token_count": theme.token_count(),
                        "tokens": theme.to_yaml_dict()["tokens"],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe theme")
            return _error(str(e))

    tools["tokens_describe_theme"] = tokens_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_apply_theme(name: str) -> str:
        """
        Register a theme's tokens for resolution.

        Replaces any previously registered tokens.

        Args:
            name: Theme name

        Returns:
            JSON string with the resolved token table

        Example:
            tokens_apply_theme(name="dark")
        """
        try:
            theme = theme_loader.get_theme(name)
            if theme is None:
                return _error(ErrorMessages.THEME_NOT_FOUND.format(name=name))

            resolver.register_tokens(theme.tokens)
            resolved = resolver.resolved_tokens

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.THEME_APPLIED.format(
                        name=theme.name, count=len(resolved)
                    ),
                    "theme": theme.name,
                    "tokens": resolved,
                }
            )
        except ValueError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to apply theme")
            return _error(str(e))

    tools["tokens_apply_theme"] = tokens_apply_theme

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_register(tokens: str) -> str:
        """
        Register a token namespace given as JSON.

        The namespace maps category names to token mappings. Values are
        strings, numbers or '@name' references. Replaces any previously
        registered tokens.

        Args:
            tokens: JSON object, e.g. '{"colors": {"primary": "#1677FF"}}'

        Returns:
            JSON string with the resolved token table

        Example:
            tokens_register(tokens='{"colors": {"primary": "#1677FF", "link": "@primary"}}')
        """
        try:
            namespace = json.loads(tokens)
            if not isinstance(namespace, dict) or not all(
                isinstance(category, dict) for category in namespace.values()
            ):
                return _error(ErrorMessages.INVALID_NAMESPACE)

            resolver.register_tokens(namespace)
            resolved = resolver.resolved_tokens

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TOKENS_REGISTERED.format(
                        count=len(resolved), categories=len(namespace)
                    ),
                    "tokens": resolved,
                }
            )
        except ValueError as e:
            # JSONDecodeError and CyclicTokenReferenceError are ValueErrors
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to register tokens")
            return _error(str(e))

    tools["tokens_register"] = tokens_register

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_get_value(token: str) -> str:
        """
        Resolve a single token reference.

        Args:
            token: Token reference such as '@primary'

        Returns:
            JSON string with the value and whether it was resolved

        Example:
            tokens_get_value(token="@primary")
        """
        try:
            value = resolver.get_token_value(token)
            return json.dumps(
                {
                    "status": "success",
                    "token": token,
                    "value": value,
                    "is_reference": is_token_reference(token),
                    "resolved": is_token_reference(token) and not is_token_reference(value),
                }
            )
        except Exception as e:
            logger.exception("Failed to get token value")
            return _error(str(e))

    tools["tokens_get_value"] = tokens_get_value

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_resolve_color(color: str) -> str:
        """
        Resolve a colour value.

        Accepts a colour string or reference, or a JSON gradient object
        with colorStops. Pattern objects are returned unchanged.

        Args:
            color: Colour string or JSON colour object

        Returns:
            JSON string with the resolved colour

        Example:
            tokens_resolve_color(color='{"type": "linear", "colorStops": [{"offset": 0, "color": "@primary"}]}')
        """
        try:
            value = _parse_json_value(color)
            return json.dumps({"status": "success", "color": resolver.resolve_color(value)})
        except Exception as e:
            logger.exception("Failed to resolve color")
            return _error(str(e))

    tools["tokens_resolve_color"] = tokens_resolve_color

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_resolve_style(style: str, mode: str = "resolve") -> str:
        """
        Resolve the fill and stroke of a style object.

        Mode 'resolve' touches only truthy fill/stroke values; mode
        'paint' touches any fill/stroke that is set (not null).

        Args:
            style: JSON style object
            mode: 'resolve' or 'paint'

        Returns:
            JSON string with the resolved style

        Example:
            tokens_resolve_style(style='{"fill": "@primary", "lineWidth": 2}', mode="paint")
        """
        try:
            if mode not in ("resolve", "paint"):
                return _error(ErrorMessages.INVALID_MODE.format(mode=mode))

            value = json.loads(style)
            if not isinstance(value, dict):
                return _error("Style must be a JSON object")

            if mode == "paint":
                resolved = resolver.get_paint_style(value)
            else:
                resolved = resolver.resolve_style(value)

            return json.dumps({"status": "success", "mode": mode, "style": resolved})
        except ValueError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to resolve style")
            return _error(str(e))

    tools["tokens_resolve_style"] = tokens_resolve_style

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_copy_theme_to_project(name: str) -> str:
        """
        Copy a library theme to the project for customization.

        Args:
            name: Theme name

        Returns:
            JSON string with path to copied theme

        Example:
            tokens_copy_theme_to_project(name="light")
        """
        try:
            path = theme_loader.copy_to_project(name)
            if path is None:
                return _error(ErrorMessages.THEME_NOT_FOUND.format(name=name))

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.THEME_COPIED,
                    "path": str(path),
                    "hint": "You can now customize this theme by editing the YAML file",
                }
            )
        except ValueError as e:
            return _error(str(e))
        except Exception as e:
            logger.exception("Failed to copy theme")
            return _error(str(e))

    tools["tokens_copy_theme_to_project"] = tokens_copy_theme_to_project

    return tools
