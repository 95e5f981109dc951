"""
Tests for MCP tools.

Tests the MCP tool implementations for theme discovery, token
registration and resolution.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_design_tokens.themes import ThemeLoader
from chuk_mcp_design_tokens.tokens import DesignTokenResolver
from chuk_mcp_design_tokens.tools.tokens import register_token_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def tools(themes_library_path: Path, temp_dir: Path) -> dict:
    """Registered token tools with an empty resolver."""
    mcp = MockMCPServer("test")
    loader = ThemeLoader(library_path=themes_library_path, project_path=temp_dir / "themes")
    return register_token_tools(mcp, DesignTokenResolver(), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self, themes_library_path: Path):
        """Every tool is registered on the server and returned."""
        mcp = MockMCPServer("test")
        tools = register_token_tools(mcp, DesignTokenResolver(), ThemeLoader(themes_library_path))
        assert set(tools) == set(mcp.tools)
        assert set(tools) == {
            "tokens_list_themes",
            "tokens_describe_theme",
            "tokens_apply_theme",
            "tokens_register",
            "tokens_get_value",
            "tokens_resolve_color",
            "tokens_resolve_style",
            "tokens_copy_theme_to_project",
        }


class TestThemeTools:
    """Tests for theme tools."""

    @pytest.mark.asyncio
    async def test_list_themes(self, tools: dict):
        """List themes tool."""
        data = json.loads(await tools["tokens_list_themes"]())
        assert data["status"] == "success"
        names = [t["name"] for t in data["themes"]]
        assert "light" in names
        assert data["count"] == len(data["themes"])

    @pytest.mark.asyncio
    async def test_describe_theme(self, tools: dict):
        """Describe theme tool."""
        data = json.loads(await tools["tokens_describe_theme"](name="light"))
        assert data["status"] == "success"
        assert data["theme"]["name"] == "light"
        assert data["theme"]["tokens"]["colors"]["primary"] == "@blue-500"
        assert data["theme"]["categories"]["spacing"] == 4

    @pytest.mark.asyncio
    async def test_describe_missing_theme(self, tools: dict):
        """Describing an unknown theme is an error."""
        data = json.loads(await tools["tokens_describe_theme"](name="nonexistent"))
        assert data["status"] == "error"
        assert "nonexistent" in data["message"]

    @pytest.mark.asyncio
    async def test_apply_theme(self, tools: dict):
        """Applying a theme registers its tokens."""
        data = json.loads(await tools["tokens_apply_theme"](name="light"))
        assert data["status"] == "success"
        assert data["tokens"]["primary"] == "#1677FF"

        value = json.loads(await tools["tokens_get_value"](token="@text"))
        assert value["value"] == "#1F1F1F"

    @pytest.mark.asyncio
    async def test_apply_missing_theme(self, tools: dict):
        """Applying an unknown theme is an error."""
        data = json.loads(await tools["tokens_apply_theme"](name="nonexistent"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_theme_to_project(self, tools: dict, temp_dir: Path):
        """Copy theme tool."""
        data = json.loads(await tools["tokens_copy_theme_to_project"](name="dark"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "themes" / "dark.yaml"

        again = json.loads(await tools["tokens_copy_theme_to_project"](name="dark"))
        assert again["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_missing_theme(self, tools: dict):
        """Copying an unknown theme is an error."""
        data = json.loads(await tools["tokens_copy_theme_to_project"](name="nonexistent"))
        assert data["status"] == "error"


class TestTokenTools:
    """Tests for token registration and resolution tools."""

    @pytest.mark.asyncio
    async def test_register(self, tools: dict):
        """Register tool resolves the namespace."""
        namespace = {"colors": {"primary": "#FF0000", "link": "@primary"}}
        data = json.loads(await tools["tokens_register"](tokens=json.dumps(namespace)))
        assert data["status"] == "success"
        assert data["tokens"] == {"primary": "#FF0000", "link": "#FF0000"}

    @pytest.mark.asyncio
    async def test_register_invalid_json(self, tools: dict):
        """Invalid JSON is an error."""
        data = json.loads(await tools["tokens_register"](tokens="{not json"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_register_flat_mapping(self, tools: dict):
        """A namespace must contain category mappings."""
        data = json.loads(await tools["tokens_register"](tokens='{"primary": "#fff"}'))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_register_cycle(self, tools: dict):
        """A reference cycle is reported as an error."""
        namespace = {"misc": {"a": "@b", "b": "@a"}}
        data = json.loads(await tools["tokens_register"](tokens=json.dumps(namespace)))
        assert data["status"] == "error"
        assert "Cyclic" in data["message"]

    @pytest.mark.asyncio
    async def test_get_value(self, tools: dict):
        """Get value reports resolution."""
        await tools["tokens_register"](tokens='{"colors": {"primary": "#FF0000"}}')

        data = json.loads(await tools["tokens_get_value"](token="@primary"))
        assert data["value"] == "#FF0000"
        assert data["is_reference"] is True
        assert data["resolved"] is True

        missing = json.loads(await tools["tokens_get_value"](token="@missing"))
        assert missing["value"] == "@missing"
        assert missing["resolved"] is False

        plain = json.loads(await tools["tokens_get_value"](token="red"))
        assert plain["value"] == "red"
        assert plain["is_reference"] is False
        assert plain["resolved"] is False

    @pytest.mark.asyncio
    async def test_resolve_color_string(self, tools: dict):
        """Resolve color accepts a bare reference."""
        await tools["tokens_register"](tokens='{"colors": {"primary": "#FF0000"}}')
        data = json.loads(await tools["tokens_resolve_color"](color="@primary"))
        assert data["color"] == "#FF0000"

    @pytest.mark.asyncio
    async def test_resolve_color_gradient(self, tools: dict):
        """Resolve color resolves gradient stops."""
        await tools["tokens_register"](tokens='{"colors": {"primary": "#FF0000"}}')
        gradient = {
            "type": "linear",
            "colorStops": [
                {"offset": 0, "color": "@primary"},
                {"offset": 1, "color": "#000"},
            ],
        }
        data = json.loads(await tools["tokens_resolve_color"](color=json.dumps(gradient)))
        assert data["color"]["colorStops"] == [
            {"offset": 0, "color": "#FF0000"},
            {"offset": 1, "color": "#000"},
        ]
        assert data["color"]["type"] == "linear"

    @pytest.mark.asyncio
    async def test_resolve_style_modes(self, tools: dict):
        """Both style modes resolve fill and stroke."""
        await tools["tokens_register"](tokens='{"colors": {"primary": "#FF0000"}}')
        style = json.dumps({"fill": "@primary", "stroke": "@missing", "lineWidth": 2})

        for mode in ("resolve", "paint"):
            data = json.loads(await tools["tokens_resolve_style"](style=style, mode=mode))
            assert data["status"] == "success"
            assert data["mode"] == mode
            assert data["style"] == {"fill": "#FF0000", "stroke": "@missing", "lineWidth": 2}

    @pytest.mark.asyncio
    async def test_resolve_style_invalid_mode(self, tools: dict):
        """Unknown modes are rejected."""
        data = json.loads(await tools["tokens_resolve_style"](style="{}", mode="other"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_resolve_style_not_object(self, tools: dict):
        """Styles must be JSON objects."""
        data = json.loads(await tools["tokens_resolve_style"](style="[1, 2]"))
        assert data["status"] == "error"
