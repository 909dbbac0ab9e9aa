"""
Registration form output model.

A RegistrationForm is plain derived data: the sections to render, the
aggregate schema to validate against and the handler that receives a
validated payload. It exports to JSON Schema + UI Schema for client
form libraries such as react-jsonschema-form.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from regform.config import get_config
from regform.models.field_definitions import (
    FieldKind,
    FormDefinitionError,
    FormField,
    FormSection,
    UserRole,
)
from regform.models.schema import FormSchema
from regform.models.validation_result import SubmissionResult

SubmitHandler = Callable[[dict[str, Any]], Awaitable[SubmissionResult]]

_JSON_TYPES = {
    FieldKind.NUMBER: "number",
    FieldKind.MULTISELECT: "array",
    FieldKind.CHECKBOX: "boolean",
}

_FORMATS = {
    FieldKind.EMAIL: "email",
    FieldKind.PASSWORD: "password",
    FieldKind.DATE: "date",
}

_WIDGETS = {
    FieldKind.TEXT: "text",
    FieldKind.EMAIL: "email",
    FieldKind.PASSWORD: "password",
    FieldKind.SELECT: "select",
    FieldKind.MULTISELECT: "checkboxes",
    FieldKind.TEXTAREA: "textarea",
    FieldKind.NUMBER: "updown",
    FieldKind.DATE: "date",
    FieldKind.FILE: "file",
    FieldKind.CHECKBOX: "checkbox",
    FieldKind.RADIO: "radio",
}


class RegistrationForm(BaseModel):
    """Complete registration form for one role."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., description="Form identifier")
    role: UserRole = Field(..., description="Role this form registers")
    title: str = Field(..., description="Form title")
    description: str = Field(..., description="Form description")
    sections: tuple[FormSection, ...] = Field(..., description="Sections in display order")
    validation_schema: FormSchema = Field(..., description="Aggregate payload rule")
    submit_handler: SubmitHandler = Field(..., description="Receives the validated payload")

    @model_validator(mode="after")
    def _check_unique_field_ids(self) -> "RegistrationForm":
        seen: set[str] = set()
        for section in self.sections:
            for field in section.fields:
                if field.id in seen:
                    raise FormDefinitionError(
                        f"Field id '{field.id}' appears twice in form '{self.id}'"
                    )
                seen.add(field.id)
        return self

    @property
    def fields(self) -> list[FormField]:
        """All fields, flattened in section order."""
        return [field for section in self.sections for field in section.fields]

    def get_field(self, field_id: str) -> FormField | None:
        for section in self.sections:
            field = section.get_field(field_id)
            if field is not None:
                return field
        return None

    def get_section(self, section_id: str) -> FormSection | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    async def submit(self, payload: dict[str, Any]) -> SubmissionResult:
        """Hand a payload to the submit handler. Does not validate."""
        return await self.submit_handler(payload)

    def to_json_schema(self) -> dict[str, Any]:
        """Export as JSON Schema dict."""
        properties = {}
        required = []

        for field in self.fields:
            prop: dict[str, Any] = {
                "type": _JSON_TYPES.get(field.kind, "string"),
                "title": field.label,
            }
            if field.help_text:
                prop["description"] = field.help_text
            if field.kind in _FORMATS:
                prop["format"] = _FORMATS[field.kind]
            if field.kind == FieldKind.MULTISELECT:
                prop["items"] = {"type": "string", "enum": field.option_values}
                prop["uniqueItems"] = True
            elif field.options:
                prop["enum"] = field.option_values
            if field.default_value is not None:
                prop["default"] = field.default_value

            properties[field.id] = prop

            if field.required:
                required.append(field.id)

        return {
            "$schema": get_config().json_schema_version,
            "type": "object",
            "title": self.title,
            "description": self.description,
            "properties": properties,
            "required": required,
        }

    def to_ui_schema(self) -> dict[str, Any]:
        """Export as UI Schema dict."""
        ui_schema: dict[str, Any] = {"ui:order": [field.id for field in self.fields]}

        for field in self.fields:
            field_ui: dict[str, Any] = {"ui:widget": _WIDGETS[field.kind]}
            if field.placeholder:
                field_ui["ui:placeholder"] = field.placeholder
            if field.help_text:
                field_ui["ui:help"] = field.help_text
            ui_schema[field.id] = field_ui

        return ui_schema

    def to_form_config(self) -> dict[str, Any]:
        """Export complete form configuration for client libraries."""
        return {
            "formId": self.id,
            "role": self.role.value,
            "title": self.title,
            "description": self.description,
            "sections": [section.to_dict() for section in self.sections],
            "schema": self.to_json_schema(),
            "uiSchema": self.to_ui_schema(),
        }
