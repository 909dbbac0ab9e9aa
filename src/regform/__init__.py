"""
regform: Dynamic registration forms for the wedding marketplace.

Build the registration form for an account role (couple, vendor or
wedding planner) and validate submissions against it.

Simple Usage:
    from regform import create_form, validate_form

    form = create_form("vendor")

    # Render form.sections, or export for a client form library
    config = form.to_form_config()

    # Validate the user's data
    result = validate_form(form, {"name": "Jane", ...})
    result.is_valid
    result.errors  # {"email": "Invalid email address", ...}

Step-by-step Usage:
    from regform import RegistrationService

    service = RegistrationService()

    # Check one step before moving on
    step = service.validate_section("vendor", "business_info", data)

    # Validate and hand the payload to the submit handler
    result = await service.submit("vendor", data)
"""

from regform.engine import (
    FieldCatalog,
    FormFactory,
    FormValidator,
    SchemaBuilder,
    SectionComposer,
    active_sections,
    build_schema,
    completion_progress,
    compose_sections,
    create_form,
    evaluate_condition,
    get_fields_for_role,
    initial_payload,
    validate_field,
    validate_form,
    validate_section,
)
from regform.models import (
    Condition,
    ConditionOperator,
    FieldKind,
    FieldValidationResult,
    FormDefinitionError,
    FormField,
    FormSchema,
    FormSection,
    RegistrationForm,
    SubmissionResult,
    UserRole,
    ValidationResult,
)
from regform.registration import RegistrationService, submit_registration
from regform.rules import Rule

__all__ = [
    # Main interface
    "create_form",
    "validate_field",
    "validate_section",
    "validate_form",
    "submit_registration",
    "RegistrationService",
    # Components
    "FieldCatalog",
    "SectionComposer",
    "SchemaBuilder",
    "FormFactory",
    "FormValidator",
    "get_fields_for_role",
    "compose_sections",
    "build_schema",
    # Rendering helpers
    "active_sections",
    "completion_progress",
    "evaluate_condition",
    "initial_payload",
    # Models
    "Condition",
    "ConditionOperator",
    "FieldKind",
    "FormField",
    "FormSection",
    "FormSchema",
    "RegistrationForm",
    "Rule",
    "UserRole",
    "FormDefinitionError",
    # Results
    "FieldValidationResult",
    "ValidationResult",
    "SubmissionResult",
]

__version__ = "0.1.0"
