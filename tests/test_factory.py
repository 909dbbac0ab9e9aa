"""Tests for the schema builder and form factory."""

import asyncio

import pytest

from regform.engine.catalog import FieldCatalog, get_fields_for_role
from regform.engine.factory import FormFactory, RegistrationSubmitHandler, create_form
from regform.engine.schema_builder import (
    CONTACT_ENTRY,
    LOCATION_ENTRY,
    SchemaBuilder,
    build_schema,
)
from regform.models.field_definitions import FieldKind, FormDefinitionError, FormField, UserRole
from regform.models.schema import SchemaEntry
from regform.models.validation_result import SubmissionResult

ROLES = ["user", "vendor", "wedding_planner"]


class TestSchemaBuilder:
    """Tests for SchemaBuilder."""

    def test_catalog_fields_first(self):
        schema = build_schema("vendor")
        field_ids = [field.id for field in get_fields_for_role("vendor")]
        assert schema.keys[: len(field_ids)] == field_ids
        assert schema.keys[len(field_ids):] == ["location", "contact", "documents"]

    def test_planner_profile_entries(self):
        schema = build_schema("wedding_planner")
        assert schema.get_entry("awards") is not None
        assert schema.get_entry("pricing").label == "Pricing"
        assert schema.get_entry("contact") is CONTACT_ENTRY

    def test_user_profile_entries(self):
        schema = build_schema("user")
        assert schema.keys[-1] == "location"
        assert schema.get_entry("location") is LOCATION_ENTRY
        assert schema.get_entry("contact") is None

    def test_entries_mirror_fields(self):
        """Test that field entries copy label, required flag and rule."""
        schema = build_schema("user")
        for field in get_fields_for_role("user"):
            entry = schema.get_entry(field.id)
            assert entry.label == field.label
            assert entry.required == field.required
            assert entry.rule is field.rule

    def test_profile_collision_rejected(self):
        catalog = FieldCatalog(
            {"user": (FormField(id="location", kind=FieldKind.TEXT, label="City"),)}
        )
        builder = SchemaBuilder(catalog)
        with pytest.raises(FormDefinitionError, match="location"):
            builder.build_schema("user")

    def test_custom_cross_field_rules(self):
        catalog = FieldCatalog({"user": (FormField(id="name", kind=FieldKind.TEXT, label="Name"),)})
        schema = SchemaBuilder(catalog, profile_entries={}, cross_field_rules=()).build_schema("user")
        assert schema.keys == ["name"]
        assert schema.cross_field_rules == ()


class TestFormFactory:
    """Tests for FormFactory and create_form."""

    @pytest.mark.parametrize("role", ROLES)
    def test_role_coverage(self, role):
        """Test every catalog field is rendered, in catalog order."""
        form = create_form(role)
        assert [field.id for field in form.fields] == [
            field.id for field in get_fields_for_role(role)
        ]
        assert form.role == UserRole(role)

    def test_unknown_role_gets_user_form(self):
        """Test that an unknown role builds the same form as "user"."""
        assert create_form("unknown_role") == create_form("user")
        assert create_form("").id == "user_registration"

    def test_unhashable_role_gets_user_form(self):
        assert create_form(["vendor"]).id == "user_registration"
        assert create_form(None).id == "user_registration"

    def test_enum_role(self):
        assert create_form(UserRole.VENDOR).id == "vendor_registration"

    def test_vendor_business_information(self):
        """Test the vendor form carries a Business Information section."""
        form = create_form("vendor")
        business = [s for s in form.sections if s.title == "Business Information"]
        assert len(business) == 1
        assert "businessName" in business[0].field_ids

    def test_metadata(self):
        form = create_form("wedding_planner")
        assert form.id == "wedding_planner_registration"
        assert form.title == "Wedding Planner Registration"
        assert form.description == "Complete your wedding planner profile to start helping couples"

    def test_default_submit_handler(self, valid_user_data):
        form = create_form("user")
        assert form.submit_handler == RegistrationSubmitHandler("user")

        result = asyncio.run(form.submit(valid_user_data))
        assert result.success is True
        assert result.message == "User registration successful"
        assert result.data == valid_user_data

    def test_injected_submit_handler(self):
        calls = []

        async def handler(payload):
            calls.append(payload)
            return SubmissionResult(success=True, message="stored")

        factory = FormFactory(submit_handlers={"vendor": handler})
        form = factory.create_form("vendor")
        result = asyncio.run(form.submit({"name": "Jane"}))

        assert result.message == "stored"
        assert calls == [{"name": "Jane"}]
        assert factory.create_form("user").submit_handler == RegistrationSubmitHandler("user")

    def test_role_without_metadata_rejected(self):
        catalog = FieldCatalog(
            {
                "user": (FormField(id="name", kind=FieldKind.TEXT, label="Name"),),
                "admin": (FormField(id="name", kind=FieldKind.TEXT, label="Name"),),
            }
        )
        with pytest.raises(FormDefinitionError):
            FormFactory(catalog=catalog).create_form("admin")

    def test_forms_are_independent_values(self):
        """Test that repeated calls build equal but separate forms."""
        first = create_form("vendor")
        second = create_form("vendor")
        assert first == second
        assert first is not second


def test_schema_entry_from_field():
    field = FormField(id="name", kind=FieldKind.TEXT, label="Full Name", required=True)
    entry = SchemaEntry.from_field(field)
    assert entry.check(None) == "Full Name is required"
    assert entry.check("") == "Full Name is required"
    assert entry.check("Jane") is None
