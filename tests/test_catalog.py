"""Tests for the field catalog and section composer."""

import pytest

from regform.engine.catalog import (
    BASE_USER_FIELDS,
    FieldCatalog,
    default_catalog,
    get_fields_for_role,
)
from regform.engine.sections import SectionComposer, SectionLayout, compose_sections
from regform.models.field_definitions import (
    FieldKind,
    FormDefinitionError,
    FormField,
    UserRole,
)

NAME = FormField(id="name", kind=FieldKind.TEXT, label="Name", required=True)
NOTES = FormField(id="notes", kind=FieldKind.TEXTAREA, label="Notes")


class TestFieldCatalog:
    """Tests for FieldCatalog."""

    def test_default_roles(self):
        assert default_catalog().roles == ["user", "vendor", "wedding_planner"]

    def test_vendor_extends_base(self):
        """Test that business roles start with the base user fields."""
        vendor_ids = [field.id for field in get_fields_for_role("vendor")]
        base_ids = [field.id for field in BASE_USER_FIELDS]
        assert vendor_ids[: len(base_ids)] == base_ids
        assert vendor_ids[len(base_ids):] == [
            "businessName",
            "category",
            "servicesOffered",
            "description",
            "experience",
            "pricing",
        ]

    def test_planner_fields(self):
        planner_ids = [field.id for field in get_fields_for_role(UserRole.WEDDING_PLANNER)]
        assert planner_ids[-5:] == [
            "companyName",
            "experienceYears",
            "specialties",
            "description",
            "certifications",
        ]

    def test_unknown_role_falls_back(self):
        """Test that unknown roles get the user fields."""
        assert get_fields_for_role("admin") == get_fields_for_role("user")
        assert default_catalog().resolve_role("admin") == "user"

    def test_get_field(self):
        field = default_catalog().get_field("vendor", "experience")
        assert field.kind == FieldKind.NUMBER
        assert default_catalog().get_field("user", "experience") is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(FormDefinitionError):
            FieldCatalog({"user": (NAME, NAME)})

    def test_missing_fallback_rejected(self):
        with pytest.raises(FormDefinitionError):
            FieldCatalog({"vendor": (NAME,)})


class TestSectionComposer:
    """Tests for SectionComposer."""

    def test_user_sections(self):
        sections = compose_sections("user")
        assert [section.title for section in sections] == [
            "Personal Information",
            "Additional Information",
        ]
        assert sections[0].field_ids == ["name", "email", "password", "confirmPassword"]
        assert sections[1].field_ids == ["phone", "dateOfBirth", "gender"]

    def test_planner_sections(self):
        sections = compose_sections("wedding_planner")
        assert sections[2].title == "Company Information"
        assert sections[3].field_ids == ["description", "certifications"]

    def test_sections_share_catalog_fields(self):
        """Test that sections hold the catalog's own field objects."""
        sections = compose_sections("user")
        assert sections[0].fields[0] is BASE_USER_FIELDS[0]

    def test_unknown_field_rejected(self):
        catalog = FieldCatalog({"user": (NAME,)})
        layouts = {"user": (SectionLayout(id="main", title="Main", field_ids=("name", "email")),)}
        with pytest.raises(FormDefinitionError, match="unknown field 'email'"):
            SectionComposer(catalog, layouts).compose_sections("user")

    def test_field_placed_twice_rejected(self):
        catalog = FieldCatalog({"user": (NAME,)})
        layouts = {
            "user": (
                SectionLayout(id="a", title="A", field_ids=("name",)),
                SectionLayout(id="b", title="B", field_ids=("name",)),
            )
        }
        with pytest.raises(FormDefinitionError, match="more than one section"):
            SectionComposer(catalog, layouts).compose_sections("user")

    def test_unplaced_field_rejected(self):
        catalog = FieldCatalog({"user": (NAME, NOTES)})
        layouts = {"user": (SectionLayout(id="main", title="Main", field_ids=("name",)),)}
        with pytest.raises(FormDefinitionError, match="notes"):
            SectionComposer(catalog, layouts).compose_sections("user")

    def test_reordered_fields_rejected(self):
        catalog = FieldCatalog({"user": (NAME, NOTES)})
        layouts = {"user": (SectionLayout(id="main", title="Main", field_ids=("notes", "name")),)}
        with pytest.raises(FormDefinitionError, match="reorder"):
            SectionComposer(catalog, layouts).compose_sections("user")

    def test_missing_layout_rejected(self):
        catalog = FieldCatalog({"user": (NAME,)})
        with pytest.raises(FormDefinitionError):
            SectionComposer(catalog, {}).compose_sections("user")

    def test_empty_section_kept(self):
        catalog = FieldCatalog({"user": (NAME,)})
        layouts = {
            "user": (
                SectionLayout(id="main", title="Main", field_ids=("name",)),
                SectionLayout(id="extras", title="Extras"),
            )
        }
        sections = SectionComposer(catalog, layouts).compose_sections("user")
        assert sections[1].fields == ()
