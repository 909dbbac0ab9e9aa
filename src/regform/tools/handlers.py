"""
Plain handlers behind the agent and MCP tools.

Each handler takes JSON-friendly arguments and returns a JSON-friendly
dict. They never raise for bad input; errors come back as data.
"""

import json
from typing import Any

from regform.config import get_config
from regform.engine.factory import create_form
from regform.engine.validator import FormValidator

JSON_ERROR_KEY = "_json"


def _resolve_role(role: str | None) -> str:
    return role or get_config().default_role


def parse_payload(payload: str | dict[str, Any] | None) -> tuple[dict[str, Any] | None, str | None]:
    """
    Accept a payload as a dict or a JSON object string.

    Returns:
        (payload, None) on success, (None, error message) otherwise.
    """
    if payload is None:
        return {}, None
    if isinstance(payload, dict):
        return payload, None
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        return None, f"Invalid JSON: {str(e)}"
    if not isinstance(data, dict):
        return None, "Form data must be a JSON object"
    return data, None


def describe_form(role: str | None = None) -> dict[str, Any]:
    """Form configuration (sections, JSON Schema, UI Schema) for a role."""
    return create_form(_resolve_role(role)).to_form_config()


def check_registration(
    role: str | None,
    payload: str | dict[str, Any] | None,
    section_id: str | None = None,
) -> dict[str, Any]:
    """
    Validate a payload for a role, either whole or one section.

    Returns:
        Dict with is_valid, errors (field id -> message), form_id and,
        for section checks, section_id.
    """
    form = create_form(_resolve_role(role))
    data, parse_error = parse_payload(payload)
    if parse_error is not None:
        return {
            "form_id": form.id,
            "is_valid": False,
            "errors": {JSON_ERROR_KEY: parse_error},
        }

    if section_id is None:
        result = FormValidator.validate_form(form, data)
        return {"form_id": form.id, **result.model_dump(exclude={"validated_data"})}

    section = form.get_section(section_id)
    if section is None:
        return {
            "form_id": form.id,
            "section_id": section_id,
            "is_valid": False,
            "errors": {"section_id": f"Unknown section: {section_id}"},
        }

    result = FormValidator.validate_section(section, data)
    return {
        "form_id": form.id,
        "section_id": section_id,
        **result.model_dump(exclude={"validated_data"}),
    }
