"""Tests for conditional visibility, progress and seed payloads."""

import pytest

from regform import rules
from regform.engine import (
    FieldCatalog,
    FormFactory,
    SchemaBuilder,
    SectionComposer,
    SectionLayout,
    active_sections,
    completion_progress,
    create_form,
    evaluate_condition,
    initial_payload,
    validate_form,
)
from regform.models.field_definitions import (
    Condition,
    ConditionOperator,
    FieldKind,
    FieldOption,
    FormField,
)

CATALOG = FieldCatalog(
    {
        "user": (
            FormField(
                id="attending",
                kind=FieldKind.RADIO,
                label="Attending",
                required=True,
                options=(FieldOption(value="yes", label="Yes"), FieldOption(value="no", label="No")),
                rule=rules.choice(["yes", "no"]),
            ),
            FormField(
                id="guests",
                kind=FieldKind.NUMBER,
                label="Guests",
                required=True,
                rule=rules.non_negative("Guests cannot be negative"),
                conditional=Condition(field="attending", value="yes"),
            ),
            FormField(
                id="reason",
                kind=FieldKind.TEXTAREA,
                label="Reason",
                required=True,
                conditional=Condition(field="attending", value="no"),
            ),
            FormField(id="dietary", kind=FieldKind.TEXT, label="Dietary Needs"),
        )
    }
)

LAYOUTS = {
    "user": (
        SectionLayout(id="rsvp", title="RSVP", field_ids=("attending", "guests", "reason")),
        SectionLayout(
            id="meal",
            title="Meal",
            field_ids=("dietary",),
            conditional=Condition(field="attending", value="yes"),
        ),
    )
}


@pytest.fixture
def rsvp_form():
    factory = FormFactory(
        catalog=CATALOG,
        composer=SectionComposer(CATALOG, LAYOUTS),
        schema_builder=SchemaBuilder(CATALOG, profile_entries={}),
    )
    return factory.create_form("user")


class TestEvaluateCondition:
    """Tests for condition operators."""

    @pytest.mark.parametrize(
        "operator,expected,actual,outcome",
        [
            (ConditionOperator.EQUALS, "yes", "yes", True),
            (ConditionOperator.EQUALS, "yes", "no", False),
            (ConditionOperator.NOT_EQUALS, "yes", "no", True),
            (ConditionOperator.CONTAINS, "luxury_weddings", ["luxury_weddings"], True),
            (ConditionOperator.CONTAINS, "flor", "florist", True),
            (ConditionOperator.CONTAINS, "x", 5, False),
            (ConditionOperator.GREATER_THAN, 2, 3, True),
            (ConditionOperator.GREATER_THAN, 2, "3", False),
            (ConditionOperator.LESS_THAN, 2, 1, True),
            (ConditionOperator.LESS_THAN, 2, None, False),
        ],
    )
    def test_operators(self, operator, expected, actual, outcome):
        condition = Condition(field="value", operator=operator, value=expected)
        assert evaluate_condition(condition, {"value": actual}) is outcome

    def test_missing_field_reads_as_none(self):
        assert evaluate_condition(Condition(field="attending", value=None), {}) is True
        assert evaluate_condition(Condition(field="attending", value="yes"), {}) is False


class TestActiveSections:
    """Tests for active_sections."""

    def test_hidden_fields_removed(self, rsvp_form):
        sections = active_sections(rsvp_form, {"attending": "yes"})
        assert [s.id for s in sections] == ["rsvp", "meal"]
        assert sections[0].field_ids == ["attending", "guests"]

    def test_hidden_section_removed(self, rsvp_form):
        sections = active_sections(rsvp_form, {"attending": "no"})
        assert [s.id for s in sections] == ["rsvp"]
        assert sections[0].field_ids == ["attending", "reason"]

    def test_form_left_untouched(self, rsvp_form):
        active_sections(rsvp_form, {"attending": "no"})
        assert rsvp_form.sections[0].field_ids == ["attending", "guests", "reason"]

    def test_validator_ignores_conditionals(self, rsvp_form):
        """Test the full form still requires hidden fields."""
        result = validate_form(rsvp_form, {"attending": "yes", "guests": 2})
        assert result.errors == {"reason": "Reason is required"}

    def test_registration_forms_have_no_conditionals(self):
        form = create_form("vendor")
        assert [s.field_ids for s in active_sections(form, {})] == [
            s.field_ids for s in form.sections
        ]


class TestProgressAndSeeds:
    """Tests for completion_progress and initial_payload."""

    def test_progress(self, rsvp_form):
        assert completion_progress(rsvp_form, {}) == 0.0
        assert completion_progress(rsvp_form, {"attending": "yes", "guests": 0}) == pytest.approx(50.0)
        assert completion_progress(
            rsvp_form, {"attending": "no", "guests": 1, "reason": "Away", "dietary": "none"}
        ) == pytest.approx(100.0)

    def test_progress_ignores_seeded_blanks(self):
        form = create_form("user")
        progress = completion_progress(form, initial_payload("user"))
        assert progress == 0.0

    def test_user_seed(self):
        payload = initial_payload("user")
        assert payload["role"] == "user"
        assert payload["location"] == {"country": "", "state": "", "city": "", "zipCode": ""}
        assert "pricing" not in payload
        assert "contact" not in payload

    def test_vendor_seed(self):
        payload = initial_payload("vendor")
        assert payload["pricing"] == {"currency": "USD", "basePrice": 0, "pricingModel": "fixed"}
        assert payload["contact"] == {"phone": "", "website": "", "socialMedia": {}}

    def test_planner_seed(self):
        payload = initial_payload("wedding_planner")
        assert payload["pricing"]["consultationFee"] == 0
        assert payload["pricing"]["packagePricing"] == "fixed"

    def test_unknown_role_seed(self):
        assert initial_payload("guest") == initial_payload("user")

    def test_seeds_are_fresh(self):
        first = initial_payload("vendor")
        first["contact"]["phone"] = "+1 555 0100"
        assert initial_payload("vendor")["contact"]["phone"] == ""
