"""
Function tools for regform.

These tools can be used by agents for delegation.
"""

from regform.tools.handlers import (
    check_registration,
    describe_form,
    parse_payload,
)
from regform.tools.registration_tools import (
    create_registration_form_tool,
    validate_registration_section_tool,
    validate_registration_tool,
)

__all__ = [
    "check_registration",
    "describe_form",
    "parse_payload",
    "create_registration_form_tool",
    "validate_registration_tool",
    "validate_registration_section_tool",
]
