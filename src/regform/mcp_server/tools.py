"""
MCP Tool definitions for regform.

Wraps the registration handlers as MCP tools.
"""

from typing import Any

from regform.tools.handlers import check_registration, describe_form

ROLE_PROPERTY = {
    "type": "string",
    "enum": ["user", "vendor", "wedding_planner"],
    "description": "Account role. Unknown roles get the user form.",
}

FORM_DATA_PROPERTY = {
    "type": "object",
    "description": "Form data keyed by field id",
    "additionalProperties": True,
}


def dispatch_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Run a tool by name.

    Raises:
        ValueError: If the tool name is unknown.
    """
    if name == "create_registration_form":
        return describe_form(arguments.get("role"))
    if name == "validate_registration":
        return check_registration(arguments.get("role"), arguments.get("form_data"))
    if name == "validate_registration_section":
        return check_registration(
            arguments.get("role"),
            arguments.get("form_data"),
            section_id=arguments.get("section_id"),
        )
    raise ValueError(f"Unknown tool: {name}")


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "create_registration_form",
            "description": """
Get the registration form for a marketplace account role.

Returns the sections to show (with field ids, types, options and help
text), a JSON Schema and a UI Schema. Vendors and wedding planners get
business/company sections after the personal ones.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {"role": ROLE_PROPERTY},
            },
        },
        {
            "name": "validate_registration",
            "description": """
Validate a complete registration payload for a role.

Returns is_valid and an errors object mapping each failing field id to
its first error message. A "general" key holds form-level errors.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "role": ROLE_PROPERTY,
                    "form_data": FORM_DATA_PROPERTY,
                },
                "required": ["role", "form_data"],
            },
        },
        {
            "name": "validate_registration_section",
            "description": """
Validate one section (step) of a registration form.

Every failing field of the section is reported at once.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "role": ROLE_PROPERTY,
                    "section_id": {
                        "type": "string",
                        "description": "Section id, e.g. personal_info or business_info",
                    },
                    "form_data": FORM_DATA_PROPERTY,
                },
                "required": ["role", "section_id", "form_data"],
            },
        },
    ]
