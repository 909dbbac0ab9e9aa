"""
Registration function tools.

Expose form creation and validation to agents. Each tool returns a
JSON string.
"""

import json
from typing import Any

from agents import RunContextWrapper, function_tool

from regform.config import get_config
from regform.tools.handlers import check_registration, describe_form


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=get_config().indent_json_output)


@function_tool
async def create_registration_form_tool(
    ctx: RunContextWrapper[Any],
    role: str | None = None,
) -> str:
    """
    Get the registration form for an account role.

    Use this tool when you need to know which fields a user, vendor or
    wedding planner has to fill in to register.

    Args:
        role: Account role: "user", "vendor" or "wedding_planner".
            Unknown roles get the user form.

    Returns:
        JSON string with the form configuration including:
        - Sections with their fields, options and help text
        - JSON Schema
        - UI Schema
    """
    return _dumps(describe_form(role))


@function_tool
async def validate_registration_tool(
    ctx: RunContextWrapper[Any],
    role: str,
    form_data_json: str,
) -> str:
    """
    Validate a complete registration payload.

    Args:
        role: Account role the payload registers.
        form_data_json: JSON string containing the form data to validate.
            Example: {"name": "Jane", "email": "jane@example.com", ...}

    Returns:
        JSON string containing validation results:
        - is_valid: boolean indicating if data is valid
        - errors: object mapping field ids to error messages
    """
    return _dumps(check_registration(role, form_data_json))


@function_tool
async def validate_registration_section_tool(
    ctx: RunContextWrapper[Any],
    role: str,
    section_id: str,
    form_data_json: str,
) -> str:
    """
    Validate one section of a registration form.

    Use this tool to check a single step (e.g. "business_info") before
    collecting the rest of the form.

    Args:
        role: Account role the payload registers.
        section_id: Id of the section to check.
        form_data_json: JSON string containing the form data.

    Returns:
        JSON string with is_valid and every failing field of the section.
    """
    return _dumps(check_registration(role, form_data_json, section_id=section_id))
