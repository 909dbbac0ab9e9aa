"""
Schema builder.

Composes a role's per-field rules, the nested profile blocks the form
does not render as single fields, and the cross-field rules into one
FormSchema.
"""

from collections.abc import Mapping, Sequence

from regform import rules
from regform.engine.catalog import FieldCatalog, default_catalog
from regform.models.field_definitions import FormDefinitionError, UserRole
from regform.models.profile import ContactDetails, Document, Location, PlannerPricing
from regform.models.schema import PASSWORDS_MATCH, FieldsMatch, FormSchema, SchemaEntry

LOCATION_ENTRY = SchemaEntry(key="location", label="Location", rule=rules.nested(Location))

CONTACT_ENTRY = SchemaEntry(
    key="contact",
    label="Contact Details",
    required=True,
    rule=rules.nested(ContactDetails),
)

DOCUMENTS_ENTRY = SchemaEntry(
    key="documents",
    label="Documents",
    rule=rules.Rule(list[Document], description="documents"),
)

PLANNER_PRICING_ENTRY = SchemaEntry(
    key="pricing",
    label="Pricing",
    required=True,
    rule=rules.nested(PlannerPricing),
)

AWARDS_ENTRY = SchemaEntry(key="awards", label="Awards", rule=rules.string_list())

PROFILE_ENTRIES: dict[str, tuple[SchemaEntry, ...]] = {
    UserRole.USER.value: (LOCATION_ENTRY,),
    UserRole.VENDOR.value: (LOCATION_ENTRY, CONTACT_ENTRY, DOCUMENTS_ENTRY),
    UserRole.WEDDING_PLANNER.value: (
        LOCATION_ENTRY,
        AWARDS_ENTRY,
        PLANNER_PRICING_ENTRY,
        CONTACT_ENTRY,
        DOCUMENTS_ENTRY,
    ),
}


class SchemaBuilder:
    """Builds the aggregate FormSchema of a role."""

    def __init__(
        self,
        catalog: FieldCatalog | None = None,
        profile_entries: Mapping[str, Sequence[SchemaEntry]] | None = None,
        cross_field_rules: Sequence[FieldsMatch] = (PASSWORDS_MATCH,),
    ):
        self.catalog = catalog or default_catalog()
        self.profile_entries = dict(PROFILE_ENTRIES if profile_entries is None else profile_entries)
        self.cross_field_rules = tuple(cross_field_rules)

    def build_schema(self, role: str) -> FormSchema:
        """
        Build the schema for a role.

        Catalog fields come first (in catalog order), then the role's
        profile entries.

        Raises:
            FormDefinitionError: If a profile entry reuses a field id.
        """
        resolved = self.catalog.resolve_role(role)
        entries = [SchemaEntry.from_field(field) for field in self.catalog.fields_for_role(resolved)]
        keys = {entry.key for entry in entries}

        for entry in self.profile_entries.get(resolved, ()):
            if entry.key in keys:
                raise FormDefinitionError(
                    f"Profile entry '{entry.key}' collides with a field of role '{resolved}'"
                )
            keys.add(entry.key)
            entries.append(entry)

        return FormSchema(
            role=resolved,
            entries=tuple(entries),
            cross_field_rules=self.cross_field_rules,
        )


def build_schema(role: str) -> FormSchema:
    return SchemaBuilder().build_schema(role)
