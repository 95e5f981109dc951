#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server provides MCP tools for resolving design token references
('@primary') in style values. Themes are YAML token namespaces; the
built-in library ships with the package and project themes override it.

The server provides tools for:
- Theme discovery and customization
- Registering token namespaces
- Resolving single tokens, colours and gradient stops
- Resolving the fill/stroke of style objects
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_design_tokens.constants import DEFAULT_THEME
from chuk_mcp_design_tokens.themes import ThemeLoader
from chuk_mcp_design_tokens.tokens import CyclicTokenReferenceError, DesignTokenResolver
from chuk_mcp_design_tokens.tools import register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-design-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEMES_DIR = BASE_PATH / "themes"
THEMES_LIBRARY_PATH = Path(__file__).parent / "themes" / "library"
INITIAL_THEME = os.environ.get("DESIGN_TOKENS_THEME", DEFAULT_THEME)

# Create managers
theme_loader = ThemeLoader(
    library_path=THEMES_LIBRARY_PATH,
    project_path=THEMES_DIR,
)
resolver = DesignTokenResolver()

initial_theme = theme_loader.get_theme(INITIAL_THEME)
if initial_theme is None:
    logger.warning(f"Initial theme not found: {INITIAL_THEME}")
else:
    try:
        resolver.register_tokens(initial_theme.tokens)
    except CyclicTokenReferenceError as e:
        logger.error(f"Initial theme '{INITIAL_THEME}' not registered: {e}")

# Register all tools
token_tools = register_token_tools(mcp, resolver, theme_loader)

# Export tool functions for direct access
tokens_list_themes = token_tools["tokens_list_themes"]
tokens_describe_theme = token_tools["tokens_describe_theme"]
tokens_apply_theme = token_tools["tokens_apply_theme"]
tokens_register = token_tools["tokens_register"]
tokens_get_value = token_tools["tokens_get_value"]
tokens_resolve_color = token_tools["tokens_resolve_color"]
tokens_resolve_style = token_tools["tokens_resolve_style"]
tokens_copy_theme_to_project = token_tools["tokens_copy_theme_to_project"]

logger.info("CHUK Design Token MCP Server initialized")
logger.info(f"  Themes library: {THEMES_LIBRARY_PATH}")
logger.info(f"  Project themes dir: {THEMES_DIR}")
logger.info(f"  Initial theme: {INITIAL_THEME}")
