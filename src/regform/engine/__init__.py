"""
Form engine for regform.

This package contains the components that turn a role into a form:
- Field catalog (role-scoped field declarations)
- Section composer (static grouping into sections)
- Schema builder (aggregate payload schema)
- Form factory (role -> RegistrationForm)
- Validator (field, section and form validation)
- Visibility helpers (conditionals, progress, seed payloads)
"""

from regform.engine.catalog import (
    FieldCatalog,
    default_catalog,
    get_fields_for_role,
)
from regform.engine.sections import (
    SectionComposer,
    SectionLayout,
    compose_sections,
)
from regform.engine.schema_builder import SchemaBuilder, build_schema
from regform.engine.factory import (
    FormFactory,
    RegistrationSubmitHandler,
    create_form,
    default_factory,
)
from regform.engine.validator import (
    FormValidator,
    validate_field,
    validate_form,
    validate_section,
)
from regform.engine.visibility import (
    active_sections,
    completion_progress,
    evaluate_condition,
    initial_payload,
    is_field_active,
    is_section_active,
)

__all__ = [
    "FieldCatalog",
    "default_catalog",
    "get_fields_for_role",
    "SectionComposer",
    "SectionLayout",
    "compose_sections",
    "SchemaBuilder",
    "build_schema",
    "FormFactory",
    "RegistrationSubmitHandler",
    "create_form",
    "default_factory",
    "FormValidator",
    "validate_field",
    "validate_form",
    "validate_section",
    "active_sections",
    "completion_progress",
    "evaluate_condition",
    "initial_payload",
    "is_field_active",
    "is_section_active",
]
