"""Unit tests for draft validation and process assembly."""

from datetime import datetime, timezone

import pytest

from process_service.core.assembly import build_process
from process_service.core.validation import parse_draft, validate, validate_payload
from process_service.models import FaunaProcessDraft, FloraProcessDraft, ProcessStatus


@pytest.mark.unit
class TestFloraValidation:
    """Flora form rules"""

    def test_valid_draft_has_no_errors(self, flora_draft):
        assert validate(flora_draft) == {}

    def test_missing_unit_count_flagged_alone(self, flora_payload):
        del flora_payload["unit_count"]
        errors = validate(FloraProcessDraft(**flora_payload))
        assert errors == {"unit_count": "Unit count is required"}

    @pytest.mark.parametrize("field", [
        "department", "municipality", "narrative", "common_name", "scientific_name",
        "reporter_name", "reporter_document", "reporter_contact",
    ])
    def test_each_required_field_is_reported(self, flora_payload, field):
        flora_payload[field] = "   "
        errors = validate(FloraProcessDraft(**flora_payload))
        assert field in errors

    def test_all_problems_reported_at_once(self):
        errors = validate(FloraProcessDraft())
        assert {
            "department", "municipality", "narrative", "common_name",
            "scientific_name", "unit_count", "reporter_name",
        } <= set(errors)

    def test_non_numeric_unit_count(self, flora_payload):
        flora_payload["unit_count"] = "fifteen"
        errors = validate(FloraProcessDraft(**flora_payload))
        assert errors["unit_count"] == "Unit count must be a valid number"

    @pytest.mark.parametrize("raw", ["1_5", "١٥"])
    def test_unit_count_only_plain_digits(self, flora_payload, raw):
        flora_payload["unit_count"] = raw
        errors = validate(FloraProcessDraft(**flora_payload))
        assert errors == {"unit_count": "Unit count must be a valid number"}

    def test_optional_measurements_must_parse(self, flora_payload):
        flora_payload.update(volume_m3="2,5", weight_kg="", length="abc")
        errors = validate(FloraProcessDraft(**flora_payload))
        assert errors == {
            "volume_m3": "Volume must be a valid number",
            "length": "Length must be a valid number",
        }

    def test_permit_subfields_required_only_when_present(self, flora_payload):
        flora_payload["has_permit"] = True
        flora_payload["permit_number"] = "SUNL-2024-001234"
        errors = validate(FloraProcessDraft(**flora_payload))
        assert set(errors) == {
            "permit_valid_until", "permit_origin", "permit_destination", "vehicle_plate",
        }

        flora_payload["has_permit"] = False
        assert validate(FloraProcessDraft(**flora_payload)) == {}

    def test_coordinates_checked_independently(self, flora_payload):
        flora_payload.update(latitude="95", longitude="")
        errors = validate(FloraProcessDraft(**flora_payload))
        assert errors == {"latitude": "Latitude must be a valid number between -90 and 90"}

    def test_department_outside_catalog_accepted(self, flora_payload):
        flora_payload["department"] = "Bogotá D.C."
        assert validate(FloraProcessDraft(**flora_payload)) == {}


@pytest.mark.unit
class TestFaunaValidation:
    """Fauna form rules"""

    def test_valid_draft_has_no_errors(self, fauna_draft):
        assert validate(fauna_draft) == {}

    def test_assessment_and_packaging_required(self, fauna_payload):
        for field in ("physical_condition", "behavior", "packaging_description"):
            fauna_payload[field] = ""
        errors = validate(FaunaProcessDraft(**fauna_payload))
        assert errors == {
            "physical_condition": "Physical condition description is required",
            "behavior": "Behavior description is required",
            "packaging_description": "Packaging description is required",
        }

    def test_legal_entity_reporter_fields(self, fauna_payload):
        fauna_payload["tax_id"] = ""
        fauna_payload["company_contact"] = ""
        errors = validate(FaunaProcessDraft(**fauna_payload))
        assert errors == {
            "tax_id": "Tax ID (NIT) is required",
            "company_contact": "Contact is required",
        }

    def test_activity_type_required(self, fauna_payload):
        fauna_payload["activity_type"] = None
        errors = validate(FaunaProcessDraft(**fauna_payload))
        assert errors == {"activity_type": "Activity type is required"}


@pytest.mark.unit
class TestParseDraft:
    """Raw payload to draft"""

    def test_discriminates_on_case_type(self, flora_payload, fauna_payload):
        flora, errors = parse_draft(flora_payload)
        assert isinstance(flora, FloraProcessDraft) and errors == {}
        fauna, errors = parse_draft(fauna_payload)
        assert isinstance(fauna, FaunaProcessDraft) and errors == {}

    def test_numbers_accepted_as_text(self, flora_payload):
        flora_payload["unit_count"] = 15
        draft, errors = parse_draft(flora_payload)
        assert errors == {}
        assert draft.unit_count == "15"

    def test_unknown_case_type(self, flora_payload):
        flora_payload["case_type"] = "fungi"
        draft, errors = parse_draft(flora_payload)
        assert draft is None
        assert "case_type" in errors

    def test_bad_enum_value_keyed_by_field(self, fauna_payload):
        fauna_payload["taxclass"] = "dragon"
        draft, errors = parse_draft(fauna_payload)
        assert draft is None
        assert list(errors) == ["taxclass"]

    def test_validate_payload_runs_field_rules(self, flora_payload):
        flora_payload["unit_count"] = ""
        assert validate_payload(flora_payload) == {"unit_count": "Unit count is required"}

    def test_null_text_reads_as_blank(self, flora_payload):
        flora_payload["department"] = None
        draft, errors = parse_draft(flora_payload)
        assert errors == {}
        assert draft.department == ""
        assert validate_payload(flora_payload) == {"department": "Department is required"}

    def test_schema_and_rule_errors_reported_together(self, fauna_payload):
        fauna_payload["taxclass"] = "dragon"
        fauna_payload["narrative"] = ""
        fauna_payload["behavior"] = ""
        errors = validate_payload(fauna_payload)
        assert set(errors) == {"taxclass", "narrative", "behavior"}
        assert errors["narrative"] == "Narrative is required"
        assert errors["behavior"] == "Behavior description is required"

    def test_unknown_case_type_skips_field_rules(self, flora_payload):
        flora_payload["case_type"] = "fungi"
        flora_payload["narrative"] = ""
        assert list(validate_payload(flora_payload)) == ["case_type"]


@pytest.mark.unit
class TestAssembly:
    """Draft to typed process"""

    NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_flora_process(self, flora_payload):
        flora_payload.update(
            latitude="6.2442", longitude="-75.5812", village="  ",
            length="300", has_permit=True, permit_number="P-1", permit_valid_until="2026-04-01",
            permit_origin="Soacha", permit_destination="Bogotá", vehicle_plate="ABC-123",
        )
        process = build_process(FloraProcessDraft(**flora_payload), "FL-1", "2", self.NOW)

        assert process.case_type == "flora"
        assert process.status == ProcessStatus.INITIATED
        assert process.created_at == process.updated_at == process.occurred_at == self.NOW
        assert process.location.village is None
        assert process.location.coordinates.latitude == 6.2442
        assert process.details.quantification.unit_count == 15
        assert process.details.quantification.dimensions.length == 300
        assert process.details.quantification.dimensions.width is None
        assert process.details.permit.vehicle_plate == "ABC-123"
        assert process.reporter.type == "natural_person"

    def test_half_coordinates_dropped(self, flora_payload):
        flora_payload["latitude"] = "6.2"
        process = build_process(FloraProcessDraft(**flora_payload), "FL-1", "2", self.NOW)
        assert process.location.coordinates is None
        assert process.details.quantification.dimensions is None
        assert process.details.permit is None

    def test_fauna_process(self, fauna_payload):
        occurred = datetime(2026, 2, 27, 8, 30, tzinfo=timezone.utc)
        fauna_payload["occurred_at"] = occurred.isoformat()
        process = build_process(FaunaProcessDraft(**fauna_payload), "FA-1", "2", self.NOW)

        assert process.case_type == "fauna"
        assert process.occurred_at == occurred
        assert process.reporter.company_name == "Fundación Amazonía Verde"
        assert process.details.identification.taxclass == "bird"
        assert process.details.media.videos is None
