"""
Section composer.

Groups a role's catalog fields into titled sections. Layouts name the
fields they hold by id; the composer resolves the ids against the
catalog and fails loudly on any inconsistency. Conditionals are carried
through untouched, they are evaluated by the rendering layer.
"""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from regform.engine.catalog import FieldCatalog, default_catalog
from regform.models.field_definitions import (
    Condition,
    FormDefinitionError,
    FormSection,
    UserRole,
)


class SectionLayout(BaseModel):
    """Static description of a section: which fields, in which order."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    field_ids: tuple[str, ...] = Field(default=())
    conditional: Condition | None = None


BASE_USER_LAYOUTS: tuple[SectionLayout, ...] = (
    SectionLayout(
        id="personal_info",
        title="Personal Information",
        description="Tell us about yourself",
        field_ids=("name", "email", "password", "confirmPassword"),
    ),
    SectionLayout(
        id="additional_info",
        title="Additional Information",
        description="Optional details to help personalize your experience",
        field_ids=("phone", "dateOfBirth", "gender"),
    ),
)

VENDOR_LAYOUTS: tuple[SectionLayout, ...] = BASE_USER_LAYOUTS + (
    SectionLayout(
        id="business_info",
        title="Business Information",
        description="Tell us about your business",
        field_ids=("businessName", "category", "servicesOffered"),
    ),
    SectionLayout(
        id="business_details",
        title="Business Details",
        description="More details about your services and experience",
        field_ids=("description", "experience", "pricing"),
    ),
)

WEDDING_PLANNER_LAYOUTS: tuple[SectionLayout, ...] = BASE_USER_LAYOUTS + (
    SectionLayout(
        id="company_info",
        title="Company Information",
        description="Tell us about your company",
        field_ids=("companyName", "experienceYears", "specialties"),
    ),
    SectionLayout(
        id="company_details",
        title="Company Details",
        description="More details about your services and experience",
        field_ids=("description", "certifications"),
    ),
)

DEFAULT_LAYOUTS: dict[str, tuple[SectionLayout, ...]] = {
    UserRole.USER.value: BASE_USER_LAYOUTS,
    UserRole.VENDOR.value: VENDOR_LAYOUTS,
    UserRole.WEDDING_PLANNER.value: WEDDING_PLANNER_LAYOUTS,
}


class SectionComposer:
    """Builds the ordered sections of a role's form."""

    def __init__(
        self,
        catalog: FieldCatalog | None = None,
        layouts: Mapping[str, Sequence[SectionLayout]] | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.layouts = {
            role: tuple(role_layouts)
            for role, role_layouts in (layouts or DEFAULT_LAYOUTS).items()
        }

    def compose_sections(self, role: str) -> tuple[FormSection, ...]:
        """
        Compose the sections for a role.

        Every catalog field must land in exactly one section, in catalog
        order. Empty sections are returned as declared.

        Raises:
            FormDefinitionError: If a layout names an unknown field, places
                a field twice, or leaves a catalog field out.
        """
        resolved = self.catalog.resolve_role(role)
        if resolved not in self.layouts:
            raise FormDefinitionError(f"No section layout for role '{resolved}'")

        fields_by_id = {field.id: field for field in self.catalog.fields_for_role(resolved)}
        placed: list[str] = []
        sections = []

        for layout in self.layouts[resolved]:
            section_fields = []
            for field_id in layout.field_ids:
                if field_id not in fields_by_id:
                    raise FormDefinitionError(
                        f"Section '{layout.id}' references unknown field '{field_id}'"
                    )
                if field_id in placed:
                    raise FormDefinitionError(
                        f"Field '{field_id}' is placed in more than one section"
                    )
                placed.append(field_id)
                section_fields.append(fields_by_id[field_id])

            sections.append(
                FormSection(
                    id=layout.id,
                    title=layout.title,
                    description=layout.description,
                    fields=tuple(section_fields),
                    conditional=layout.conditional,
                )
            )

        if placed != list(fields_by_id):
            missing = [field_id for field_id in fields_by_id if field_id not in placed]
            if missing:
                raise FormDefinitionError(
                    f"Fields not placed in any section for role '{resolved}': {', '.join(missing)}"
                )
            raise FormDefinitionError(f"Sections for role '{resolved}' reorder catalog fields")

        return tuple(sections)


def compose_sections(role: str) -> tuple[FormSection, ...]:
    return SectionComposer().compose_sections(role)
