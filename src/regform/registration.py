"""
Registration service.

This is the main entry point for callers that own a registration flow:
build the form for a role, validate while the user edits, and submit
once the whole payload passes.
"""

import logging
from collections.abc import Mapping
from typing import Any

from regform.engine.factory import FormFactory, default_factory
from regform.engine.validator import FormValidator
from regform.engine.visibility import is_field_active, is_section_active
from regform.models.form import RegistrationForm
from regform.models.validation_result import (
    GENERAL_ERROR_KEY,
    SubmissionResult,
    ValidationResult,
)

logger = logging.getLogger("regform")


class RegistrationService:
    """
    Simple facade over the form factory and validator.

    Usage:
        service = RegistrationService()

        form = service.create_form("vendor")
        step = service.validate_section("vendor", "business_info", data)
        result = await service.submit("vendor", data)
    """

    def __init__(
        self,
        factory: FormFactory | None = None,
        only_active_fields: bool = False,
    ):
        """
        Initialize the service.

        Args:
            factory: Form factory to use. If None, uses the process-wide default.
            only_active_fields: Whether section validation skips fields and
                sections hidden by their conditionals. Default: False.
        """
        self.factory = factory or default_factory()
        self.only_active_fields = only_active_fields

    def create_form(self, role: str) -> RegistrationForm:
        return self.factory.create_form(role)

    def validate_section(
        self,
        role: str,
        section_id: str,
        payload: Mapping[str, Any],
    ) -> ValidationResult:
        """
        Validate one section of a role's form.

        Raises:
            KeyError: If the form has no section with this id.
        """
        form = self.create_form(role)
        section = form.get_section(section_id)
        if section is None:
            raise KeyError(f"Form '{form.id}' has no section '{section_id}'")

        if self.only_active_fields and isinstance(payload, Mapping):
            if not is_section_active(section, payload):
                return ValidationResult(is_valid=True, validated_data={})
            section = section.model_copy(
                update={"fields": tuple(f for f in section.fields if is_field_active(f, payload))}
            )

        return FormValidator.validate_section(section, payload)

    def validate(self, role: str, payload: Mapping[str, Any]) -> ValidationResult:
        """Validate a full payload for a role."""
        return FormValidator.validate_form(self.create_form(role), payload)

    async def submit(self, role: str, payload: Mapping[str, Any]) -> SubmissionResult:
        """Validate and submit a payload for a role."""
        return await submit_registration(self.create_form(role), payload)


async def submit_registration(
    form: RegistrationForm,
    payload: Mapping[str, Any],
) -> SubmissionResult:
    """
    Validate a payload and hand it to the form's submit handler.

    The handler is only awaited when validation passes. A handler
    failure is returned as an unsuccessful result.

    Example:
        >>> form = create_form("user")
        >>> result = await submit_registration(form, data)
        >>> result.success
        True
    """
    validation = FormValidator.validate_form(form, payload)
    if not validation.is_valid:
        return SubmissionResult(
            success=False,
            message=validation.general_error or "Please fix the highlighted fields",
            errors=validation.errors,
        )

    try:
        return await form.submit(dict(payload))
    except Exception as e:
        logger.warning(f"Submit handler of form '{form.id}' failed: {type(e).__name__}: {e}")
        return SubmissionResult(
            success=False,
            message=str(e) or "Registration failed",
            errors={GENERAL_ERROR_KEY: str(e) or "Registration failed"},
        )
