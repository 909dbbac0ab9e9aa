"""
Field catalog.

Static, role-scoped field declarations. The default catalog is built
once per process and only read afterwards; tests and alternative
deployments can construct their own FieldCatalog and inject it into
the factory.
"""

import functools
from collections.abc import Mapping, Sequence
from enum import Enum

from regform import rules
from regform.models.field_definitions import (
    FieldKind,
    FieldOption,
    FormDefinitionError,
    FormField,
    UserRole,
)
from regform.models.profile import GENDERS, VendorPricing


def _options(*pairs: tuple[str, str]) -> tuple[FieldOption, ...]:
    return tuple(FieldOption(value=value, label=label) for value, label in pairs)


BASE_USER_FIELDS: tuple[FormField, ...] = (
    FormField(
        id="name",
        kind=FieldKind.TEXT,
        label="Full Name",
        placeholder="Enter your full name",
        required=True,
        rule=rules.text(min_length=2, message="Name must be at least 2 characters"),
    ),
    FormField(
        id="email",
        kind=FieldKind.EMAIL,
        label="Email Address",
        placeholder="Enter your email address",
        required=True,
        rule=rules.email("Invalid email address"),
    ),
    FormField(
        id="password",
        kind=FieldKind.PASSWORD,
        label="Password",
        placeholder="Create a strong password",
        required=True,
        rule=rules.text(min_length=8, message="Password must be at least 8 characters"),
        help_text="Must be at least 8 characters long",
    ),
    FormField(
        id="confirmPassword",
        kind=FieldKind.PASSWORD,
        label="Confirm Password",
        placeholder="Confirm your password",
        required=True,
        rule=rules.text(),
    ),
    FormField(
        id="phone",
        kind=FieldKind.TEXT,
        label="Phone Number",
        placeholder="Enter your phone number",
        rule=rules.text(),
    ),
    FormField(
        id="dateOfBirth",
        kind=FieldKind.DATE,
        label="Date of Birth",
        rule=rules.text(),
    ),
    FormField(
        id="gender",
        kind=FieldKind.SELECT,
        label="Gender",
        options=_options(
            ("male", "Male"),
            ("female", "Female"),
            ("other", "Other"),
            ("prefer_not_to_say", "Prefer not to say"),
        ),
        rule=rules.choice(GENDERS, "Please select a valid gender option"),
    ),
)

VENDOR_FIELDS: tuple[FormField, ...] = (
    FormField(
        id="businessName",
        kind=FieldKind.TEXT,
        label="Business Name",
        placeholder="Enter your business name",
        required=True,
        rule=rules.text(min_length=2, message="Business name must be at least 2 characters"),
    ),
    FormField(
        id="category",
        kind=FieldKind.SELECT,
        label="Business Category",
        required=True,
        options=_options(
            ("photography", "Photography"),
            ("videography", "Videography"),
            ("catering", "Catering"),
            ("florist", "Florist"),
            ("music", "Music & Entertainment"),
            ("transportation", "Transportation"),
            ("decor", "Decor & Styling"),
            ("beauty", "Beauty & Hair"),
            ("jewelry", "Jewelry"),
            ("other", "Other"),
        ),
        rule=rules.text(min_length=1, message="Please select a category"),
    ),
    FormField(
        id="servicesOffered",
        kind=FieldKind.MULTISELECT,
        label="Services Offered",
        required=True,
        options=_options(
            ("wedding_planning", "Wedding Planning"),
            ("event_coordination", "Event Coordination"),
            ("design_consultation", "Design Consultation"),
            ("vendor_coordination", "Vendor Coordination"),
            ("day_of_coordination", "Day-of Coordination"),
            ("full_service", "Full Service"),
        ),
        rule=rules.non_empty_list("Please select at least one service"),
    ),
    FormField(
        id="description",
        kind=FieldKind.TEXTAREA,
        label="Business Description",
        placeholder="Describe your business and services...",
        required=True,
        rule=rules.text(min_length=50, message="Description must be at least 50 characters"),
        help_text="Tell potential clients about your business, experience, and what makes you unique",
    ),
    FormField(
        id="experience",
        kind=FieldKind.NUMBER,
        label="Years of Experience",
        placeholder="0",
        required=True,
        rule=rules.non_negative("Experience cannot be negative"),
        help_text="How many years have you been in business?",
    ),
    FormField(
        id="pricing",
        kind=FieldKind.SELECT,
        label="Pricing Model",
        required=True,
        options=_options(
            ("hourly", "Hourly Rate"),
            ("daily", "Daily Rate"),
            ("fixed", "Fixed Price"),
            ("custom", "Custom Quote"),
        ),
        rule=rules.nested(VendorPricing),
    ),
)

WEDDING_PLANNER_FIELDS: tuple[FormField, ...] = (
    FormField(
        id="companyName",
        kind=FieldKind.TEXT,
        label="Company Name",
        placeholder="Enter your company name",
        required=True,
        rule=rules.text(min_length=2, message="Company name must be at least 2 characters"),
    ),
    FormField(
        id="experienceYears",
        kind=FieldKind.NUMBER,
        label="Years of Experience",
        placeholder="0",
        required=True,
        rule=rules.non_negative("Experience cannot be negative"),
        help_text="How many years have you been planning weddings?",
    ),
    FormField(
        id="specialties",
        kind=FieldKind.MULTISELECT,
        label="Specialties",
        required=True,
        options=_options(
            ("destination_weddings", "Destination Weddings"),
            ("intimate_weddings", "Intimate Weddings"),
            ("luxury_weddings", "Luxury Weddings"),
            ("budget_weddings", "Budget Weddings"),
            ("cultural_weddings", "Cultural Weddings"),
            ("same_sex_weddings", "Same-Sex Weddings"),
            ("elopements", "Elopements"),
            ("corporate_events", "Corporate Events"),
        ),
        rule=rules.non_empty_list("Please select at least one specialty"),
    ),
    FormField(
        id="description",
        kind=FieldKind.TEXTAREA,
        label="Company Description",
        placeholder="Describe your company and services...",
        required=True,
        rule=rules.text(min_length=50, message="Description must be at least 50 characters"),
        help_text="Tell potential clients about your company, experience, and what makes you unique",
    ),
    FormField(
        id="certifications",
        kind=FieldKind.MULTISELECT,
        label="Certifications",
        options=_options(
            ("certified_wedding_planner", "Certified Wedding Planner"),
            ("event_planning_certificate", "Event Planning Certificate"),
            ("hospitality_management", "Hospitality Management"),
            ("project_management", "Project Management"),
            ("other", "Other"),
        ),
        rule=rules.string_list(),
    ),
)


class FieldCatalog:
    """
    Immutable mapping of role -> ordered field definitions.

    Unknown roles resolve to the fallback role, which is a policy and
    not an error.
    """

    def __init__(
        self,
        role_fields: Mapping[str, Sequence[FormField]],
        fallback_role: str = UserRole.USER.value,
    ):
        if fallback_role not in role_fields:
            raise FormDefinitionError(f"Fallback role '{fallback_role}' has no fields")

        self._fields: dict[str, tuple[FormField, ...]] = {}
        for role, fields in role_fields.items():
            ids = [field.id for field in fields]
            duplicates = sorted({field_id for field_id in ids if ids.count(field_id) > 1})
            if duplicates:
                raise FormDefinitionError(
                    f"Duplicate field ids for role '{role}': {', '.join(duplicates)}"
                )
            self._fields[role] = tuple(fields)
        self.fallback_role = fallback_role

    @property
    def roles(self) -> list[str]:
        return list(self._fields)

    def resolve_role(self, role: str) -> str:
        """Map a role name to a catalog role, falling back for anything unknown."""
        if isinstance(role, Enum):
            role = role.value
        if isinstance(role, str) and role in self._fields:
            return role
        return self.fallback_role

    def fields_for_role(self, role: str) -> tuple[FormField, ...]:
        """Return the role's fields in catalog order."""
        return self._fields[self.resolve_role(role)]

    def get_field(self, role: str, field_id: str) -> FormField | None:
        for field in self.fields_for_role(role):
            if field.id == field_id:
                return field
        return None


@functools.lru_cache(maxsize=1)
def default_catalog() -> FieldCatalog:
    """Build (once) the catalog of the three registration roles."""
    return FieldCatalog(
        {
            UserRole.USER.value: BASE_USER_FIELDS,
            UserRole.VENDOR.value: BASE_USER_FIELDS + VENDOR_FIELDS,
            UserRole.WEDDING_PLANNER.value: BASE_USER_FIELDS + WEDDING_PLANNER_FIELDS,
        }
    )


def get_fields_for_role(role: str) -> tuple[FormField, ...]:
    return default_catalog().fields_for_role(role)
