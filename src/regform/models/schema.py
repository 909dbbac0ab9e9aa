"""
Aggregate validation schema for a registration payload.

A FormSchema is the form-level rule: an ordered list of entries (one per
payload key, each with its `required` flag and optional Rule) plus
cross-field rules. Entries and cross-field rules compose by AND.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from regform.models.field_definitions import FormField
from regform.models.validation_result import ValidationResult
from regform.rules import Rule


def is_missing(value: Any) -> bool:
    """A value counts as missing when it is absent (None) or an empty string."""
    return value is None or (isinstance(value, str) and value == "")


class SchemaEntry(BaseModel):
    """Validation for one payload key."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str
    label: str
    required: bool = False
    rule: Rule | None = None

    @classmethod
    def from_field(cls, field: FormField) -> "SchemaEntry":
        return cls(key=field.id, label=field.label, required=field.required, rule=field.rule)

    def check(self, value: Any) -> str | None:
        """Return the first violation for `value`, or None when it passes."""
        if is_missing(value):
            if self.required:
                return f"{self.label} is required"
            return None
        if self.rule is None:
            return None
        return self.rule.validate(value)


class FieldsMatch(BaseModel):
    """Cross-field rule: two present values must be equal."""

    model_config = ConfigDict(frozen=True)

    field: str
    confirm_field: str
    message: str

    def check(self, payload: Mapping[str, Any]) -> tuple[str, str] | None:
        """Return (path, message) on mismatch; the error attaches to the confirming field."""
        value = payload.get(self.field)
        confirmation = payload.get(self.confirm_field)
        if is_missing(value) or is_missing(confirmation):
            return None
        if value != confirmation:
            return self.confirm_field, self.message
        return None


PASSWORDS_MATCH = FieldsMatch(
    field="password",
    confirm_field="confirmPassword",
    message="Passwords don't match",
)


class FormSchema(BaseModel):
    """The aggregate rule for one role's registration payload."""

    model_config = ConfigDict(frozen=True)

    role: str
    entries: tuple[SchemaEntry, ...]
    cross_field_rules: tuple[FieldsMatch, ...] = ()

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def get_entry(self, key: str) -> SchemaEntry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a full payload.

        Every entry is checked (no short-circuit) and the first violation
        per key is kept. Rule exceptions other than validation failures
        propagate.
        """
        errors: dict[str, str] = {}

        for entry in self.entries:
            message = entry.check(payload.get(entry.key))
            if message is not None and entry.key not in errors:
                errors[entry.key] = message

        for rule in self.cross_field_rules:
            violation = rule.check(payload)
            if violation is not None:
                path, message = violation
                errors.setdefault(path, message)

        if errors:
            return ValidationResult(is_valid=False, errors=errors)
        return ValidationResult(is_valid=True, validated_data=dict(payload))
