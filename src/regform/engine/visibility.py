"""
Conditional visibility, completion progress and seed payloads.

These helpers serve the rendering layer. The validator does not look
at conditionals: a caller that hides inactive fields validates
`active_sections(form, payload)` instead of the full form.
"""

from collections.abc import Mapping
from typing import Any

from regform.models.field_definitions import (
    Condition,
    ConditionOperator,
    FormField,
    FormSection,
    UserRole,
)
from regform.models.form import RegistrationForm
from regform.models.schema import is_missing


def evaluate_condition(condition: Condition, payload: Mapping[str, Any]) -> bool:
    """
    Evaluate a visibility predicate against the form's live data.

    A missing value reads as None. Comparisons between values that do
    not support them make the predicate false.
    """
    actual = payload.get(condition.field)
    expected = condition.value

    if condition.operator == ConditionOperator.EQUALS:
        return actual == expected
    if condition.operator == ConditionOperator.NOT_EQUALS:
        return actual != expected
    if condition.operator == ConditionOperator.CONTAINS:
        if isinstance(actual, str):
            return isinstance(expected, str) and expected in actual
        if isinstance(actual, (list, tuple, set, frozenset, dict)):
            try:
                return expected in actual
            except TypeError:
                return False
        return False

    if actual is None or expected is None:
        return False
    try:
        if condition.operator == ConditionOperator.GREATER_THAN:
            return actual > expected
        if condition.operator == ConditionOperator.LESS_THAN:
            return actual < expected
    except TypeError:
        return False
    raise ValueError(f"Unsupported condition operator: {condition.operator}")


def is_field_active(field: FormField, payload: Mapping[str, Any]) -> bool:
    return field.conditional is None or evaluate_condition(field.conditional, payload)


def is_section_active(section: FormSection, payload: Mapping[str, Any]) -> bool:
    return section.conditional is None or evaluate_condition(section.conditional, payload)


def active_sections(form: RegistrationForm, payload: Mapping[str, Any]) -> tuple[FormSection, ...]:
    """
    Sections shown for the current payload, each holding only its active fields.

    An active section whose fields are all hidden is still returned.
    """
    sections = []
    for section in form.sections:
        if not is_section_active(section, payload):
            continue
        fields = tuple(field for field in section.fields if is_field_active(field, payload))
        sections.append(section.model_copy(update={"fields": fields}))
    return tuple(sections)


def completion_progress(form: RegistrationForm, payload: Mapping[str, Any]) -> float:
    """Percentage (0-100) of the form's fields that hold a value."""
    fields = form.fields
    if not fields:
        return 0.0
    completed = sum(1 for field in fields if not is_missing(payload.get(field.id)))
    return min(100.0, completed * 100.0 / len(fields))


def initial_payload(role: str) -> dict[str, Any]:
    """
    Seed values for a role's registration payload.

    Unknown roles get the user seed.
    """
    if isinstance(role, UserRole):
        role = role.value
    if role not in (UserRole.VENDOR.value, UserRole.WEDDING_PLANNER.value):
        role = UserRole.USER.value

    payload: dict[str, Any] = {
        "role": role,
        "dateOfBirth": "",
        "gender": "",
        "phone": "",
        "location": {"country": "", "state": "", "city": "", "zipCode": ""},
    }

    if role == UserRole.VENDOR.value:
        payload["pricing"] = {"currency": "USD", "basePrice": 0, "pricingModel": "fixed"}
    elif role == UserRole.WEDDING_PLANNER.value:
        payload["pricing"] = {"currency": "USD", "consultationFee": 0, "packagePricing": "fixed"}

    if role != UserRole.USER.value:
        payload["contact"] = {"phone": "", "website": "", "socialMedia": {}}

    return payload
