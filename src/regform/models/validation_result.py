"""
Validation result models.

Validation outcomes are always returned as data: a field check yields a
FieldValidationResult, section and form checks yield a ValidationResult
whose `errors` map a field id (or `general`) to one message.
"""

from typing import Any

from pydantic import BaseModel, Field

GENERAL_ERROR_KEY = "general"


class FieldValidationResult(BaseModel):
    """Result of validating a single field value."""

    is_valid: bool = Field(..., description="Whether the value is valid")
    error: str | None = Field(default=None, description="First violation message")


class ValidationResult(BaseModel):
    """Result of section or form validation."""

    is_valid: bool = Field(..., description="Whether the data is valid")
    errors: dict[str, str] = Field(
        default_factory=dict, description="Field id -> first error message"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="The payload, when valid"
    )

    @property
    def error_count(self) -> int:
        """Get the number of fields with errors."""
        return len(self.errors)

    def get_field_error(self, field_id: str) -> str | None:
        """Get the error message for a specific field."""
        return self.errors.get(field_id)

    @property
    def general_error(self) -> str | None:
        """Form-level error shown as a banner, if any."""
        return self.errors.get(GENERAL_ERROR_KEY)


class SubmissionResult(BaseModel):
    """Outcome of a registration submission."""

    success: bool = Field(..., description="Whether the registration went through")
    message: str | None = Field(default=None)
    errors: dict[str, str] = Field(default_factory=dict)
    data: dict[str, Any] | None = Field(default=None)
