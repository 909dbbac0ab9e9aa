"""
Field and section definition models for registration forms.

Fields are immutable value objects declared once per role and shared
by every form built from them. A field carries its display strings,
its `required` flag and an optional Rule; sections group fields in
display (and validation) order.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from regform.rules import Rule

# Valid field id pattern (alphanumeric + underscore, camelCase allowed)
VALID_FIELD_ID = r"^[a-zA-Z_][a-zA-Z0-9_]*$"


class FormDefinitionError(ValueError):
    """Raised when a form, section or field is declared inconsistently."""


class UserRole(str, Enum):
    """Account roles that have a dedicated registration form."""

    USER = "user"
    VENDOR = "vendor"
    WEDDING_PLANNER = "wedding_planner"


class FieldKind(str, Enum):
    """Input widget kinds a field can be rendered as."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    FILE = "file"
    CHECKBOX = "checkbox"
    RADIO = "radio"


OPTION_KINDS = frozenset({FieldKind.SELECT, FieldKind.MULTISELECT, FieldKind.RADIO})


class ConditionOperator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class Condition(BaseModel):
    """Visibility predicate over another field's current value."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Id of the field whose value is tested")
    operator: ConditionOperator = Field(default=ConditionOperator.EQUALS)
    value: Any = Field(default=None, description="Expected value")


class FieldOption(BaseModel):
    """One (value, label) choice of a select, multiselect or radio field."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FormField(BaseModel):
    """A single typed input definition."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., pattern=VALID_FIELD_ID, description="Field key, unique within a form")
    kind: FieldKind = Field(..., description="Widget kind")
    label: str = Field(..., description="Human-readable label")
    placeholder: str | None = Field(default=None)
    help_text: str | None = Field(default=None)
    required: bool = Field(default=False)
    rule: Rule | None = Field(default=None, description="Validation applied when a value is present")
    options: tuple[FieldOption, ...] = Field(default=())
    conditional: Condition | None = Field(default=None)
    default_value: Any = Field(default=None)

    @model_validator(mode="after")
    def _check_options(self) -> "FormField":
        if self.kind in OPTION_KINDS and not self.options:
            raise ValueError(f"Field '{self.id}' of kind '{self.kind.value}' needs options")
        return self

    @property
    def option_values(self) -> list[str]:
        return [option.value for option in self.options]

    def to_dict(self) -> dict[str, Any]:
        """Export the display definition (the rule is not serializable)."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.kind.value,
            "label": self.label,
            "required": self.required,
        }
        if self.placeholder:
            data["placeholder"] = self.placeholder
        if self.help_text:
            data["helpText"] = self.help_text
        if self.options:
            data["options"] = [option.model_dump() for option in self.options]
        if self.conditional:
            data["conditional"] = self.conditional.model_dump(mode="json")
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        return data


class FormSection(BaseModel):
    """A named, ordered group of fields."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Section identifier")
    title: str = Field(..., description="Section heading")
    description: str | None = Field(default=None)
    fields: tuple[FormField, ...] = Field(default=())
    conditional: Condition | None = Field(default=None)

    @property
    def field_ids(self) -> list[str]:
        return [field.id for field in self.fields]

    def get_field(self, field_id: str) -> FormField | None:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "fields": [field.to_dict() for field in self.fields],
        }
        if self.description:
            data["description"] = self.description
        if self.conditional:
            data["conditional"] = self.conditional.model_dump(mode="json")
        return data
