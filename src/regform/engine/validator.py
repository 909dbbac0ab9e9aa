"""
Validation utilities for registration forms.

Three granularities share one rule path (SchemaEntry.check):
- a single field, while the user types
- a section, before moving to the next step
- the whole payload, on submit

Validation never raises to the caller. A rule that blows up with an
unexpected exception is logged and reported as a generic failure.
"""

import logging
from collections.abc import Mapping
from typing import Any

from regform.models.field_definitions import FormField, FormSection
from regform.models.form import RegistrationForm
from regform.models.schema import SchemaEntry
from regform.models.validation_result import (
    GENERAL_ERROR_KEY,
    FieldValidationResult,
    ValidationResult,
)

logger = logging.getLogger("regform")

FIELD_FAILURE_MESSAGE = "Validation failed"
FORM_FAILURE_MESSAGE = "Form validation failed"


class FormValidator:
    """Validates values, sections and payloads against form definitions."""

    @staticmethod
    def validate_field(field: FormField, value: Any) -> FieldValidationResult:
        """
        Validate one field value.

        `required` is checked first; the field's rule only runs when a
        value is present.
        """
        try:
            error = SchemaEntry.from_field(field).check(value)
        except Exception:
            logger.exception(f"Rule for field '{field.id}' raised unexpectedly")
            return FieldValidationResult(is_valid=False, error=FIELD_FAILURE_MESSAGE)

        if error is not None:
            return FieldValidationResult(is_valid=False, error=error)
        return FieldValidationResult(is_valid=True)

    @classmethod
    def validate_section(cls, section: FormSection, payload: Mapping[str, Any]) -> ValidationResult:
        """Validate every field of a section, collecting all failures."""
        if not isinstance(payload, Mapping):
            return ValidationResult(
                is_valid=False,
                errors={GENERAL_ERROR_KEY: "Form data must be an object"},
            )

        errors: dict[str, str] = {}

        for field in section.fields:
            result = cls.validate_field(field, payload.get(field.id))
            if not result.is_valid:
                errors[field.id] = result.error or FIELD_FAILURE_MESSAGE

        if errors:
            return ValidationResult(is_valid=False, errors=errors)
        return ValidationResult(
            is_valid=True,
            validated_data={field.id: payload.get(field.id) for field in section.fields},
        )

    @staticmethod
    def validate_form(form: RegistrationForm, payload: Mapping[str, Any]) -> ValidationResult:
        """Validate a full payload against the form's aggregate schema."""
        if not isinstance(payload, Mapping):
            return ValidationResult(
                is_valid=False,
                errors={GENERAL_ERROR_KEY: "Form data must be an object"},
            )

        try:
            return form.validation_schema.validate(payload)
        except Exception:
            logger.exception(f"Schema of form '{form.id}' raised unexpectedly")
            return ValidationResult(
                is_valid=False,
                errors={GENERAL_ERROR_KEY: FORM_FAILURE_MESSAGE},
            )


validate_field = FormValidator.validate_field
validate_section = FormValidator.validate_section
validate_form = FormValidator.validate_form
