"""
Data models for regform.

This module contains Pydantic models for:
- Field and section definitions
- Nested profile blocks (location, contact, pricing, documents)
- The aggregate payload schema and the registration form
- Validation and submission results
"""

from regform.models.field_definitions import (
    Condition,
    ConditionOperator,
    FieldKind,
    FieldOption,
    FormDefinitionError,
    FormField,
    FormSection,
    UserRole,
)
from regform.models.profile import (
    ContactDetails,
    Document,
    Location,
    PlannerPricing,
    SocialMedia,
    VendorPricing,
)
from regform.models.validation_result import (
    GENERAL_ERROR_KEY,
    FieldValidationResult,
    SubmissionResult,
    ValidationResult,
)
from regform.models.schema import (
    PASSWORDS_MATCH,
    FieldsMatch,
    FormSchema,
    SchemaEntry,
    is_missing,
)
from regform.models.form import RegistrationForm, SubmitHandler

__all__ = [
    # Definitions
    "Condition",
    "ConditionOperator",
    "FieldKind",
    "FieldOption",
    "FormDefinitionError",
    "FormField",
    "FormSection",
    "UserRole",
    # Profile blocks
    "ContactDetails",
    "Document",
    "Location",
    "PlannerPricing",
    "SocialMedia",
    "VendorPricing",
    # Schema and form
    "FieldsMatch",
    "FormSchema",
    "PASSWORDS_MATCH",
    "RegistrationForm",
    "SchemaEntry",
    "SubmitHandler",
    "is_missing",
    # Results
    "FieldValidationResult",
    "GENERAL_ERROR_KEY",
    "SubmissionResult",
    "ValidationResult",
]
