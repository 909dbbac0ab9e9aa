"""Tests for the MCP tool surface and SSE app."""

import pytest
from starlette.testclient import TestClient

from regform.mcp_server import create_mcp_server, create_sse_app, dispatch_tool, get_mcp_tools

TOOL_NAMES = [
    "create_registration_form",
    "validate_registration",
    "validate_registration_section",
]


class TestMcpTools:
    """Tests for MCP tool definitions and dispatch."""

    def test_tool_definitions(self):
        tools = get_mcp_tools()
        assert [tool["name"] for tool in tools] == TOOL_NAMES
        for tool in tools:
            assert tool["description"]
            assert tool["inputSchema"]["type"] == "object"

    def test_required_arguments(self):
        schemas = {tool["name"]: tool["inputSchema"] for tool in get_mcp_tools()}
        assert schemas["validate_registration"]["required"] == ["role", "form_data"]
        assert "section_id" in schemas["validate_registration_section"]["required"]

    def test_dispatch_create(self):
        result = dispatch_tool("create_registration_form", {"role": "wedding_planner"})
        assert result["formId"] == "wedding_planner_registration"

    def test_dispatch_validate(self, valid_user_data):
        result = dispatch_tool(
            "validate_registration",
            {"role": "user", "form_data": valid_user_data},
        )
        assert result["is_valid"] is True

    def test_dispatch_validate_section(self):
        result = dispatch_tool(
            "validate_registration_section",
            {
                "role": "user",
                "section_id": "personal_info",
                "form_data": {"name": "Jane", "email": "jane@example.com"},
            },
        )
        assert result["errors"] == {
            "password": "Password is required",
            "confirmPassword": "Confirm Password is required",
        }

    def test_dispatch_unknown_tool(self):
        with pytest.raises(ValueError, match="Unknown tool"):
            dispatch_tool("delete_account", {})


class TestServer:
    """Tests for server construction."""

    def test_server_name(self):
        assert create_mcp_server().name == "regform-mcp"

    def test_health_endpoint(self):
        app = create_sse_app(create_mcp_server())
        client = TestClient(app)

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "regform-mcp"
        assert body["tools"] == TOOL_NAMES
