"""Validation rules for flora and fauna process drafts.

``validate`` is a pure function: it never raises and never touches storage.
It returns every violated rule at once as a field -> message mapping; an
empty mapping means the draft may be submitted.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from process_service.core.parsing import (
    FieldParseError,
    is_blank,
    parse_latitude,
    parse_longitude,
    parse_optional_number,
    parse_positive_int,
)
from process_service.models.drafts import (
    DraftBase,
    FaunaProcessDraft,
    FloraProcessDraft,
    ProcessDraft,
)
from process_service.models.process import ReporterType

ValidationErrors = Dict[str, str]

_draft_adapter: TypeAdapter = TypeAdapter(ProcessDraft)

_NATURAL_PERSON_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("reporter_name", "Name is required"),
    ("reporter_document", "ID document is required"),
    ("reporter_contact", "Contact is required"),
)

_LEGAL_ENTITY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("company_name", "Company name is required"),
    ("tax_id", "Tax ID (NIT) is required"),
    ("legal_representative", "Legal representative is required"),
    ("company_contact", "Contact is required"),
)

_PERMIT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("permit_number", "Permit number is required"),
    ("permit_valid_until", "Permit validity is required"),
    ("permit_origin", "Permit origin is required"),
    ("permit_destination", "Permit destination is required"),
    ("vehicle_plate", "Vehicle plate is required"),
)

_FAUNA_REQUIRED: Tuple[Tuple[str, str], ...] = (
    ("common_name", "Common name is required"),
    ("scientific_name", "Scientific name is required"),
    ("physical_condition", "Physical condition description is required"),
    ("behavior", "Behavior description is required"),
    ("packaging_description", "Packaging description is required"),
)


def validate(draft: DraftBase) -> ValidationErrors:
    """Validate a flora or fauna draft.

    Returns:
        Mapping of draft field name to error message; empty when valid.
    """
    errors: ValidationErrors = {}
    _validate_common(draft, errors)
    _validate_reporter(draft, errors)
    _validate_coordinates(draft, errors)

    if isinstance(draft, FloraProcessDraft):
        _validate_flora(draft, errors)
    elif isinstance(draft, FaunaProcessDraft):
        _validate_fauna(draft, errors)
    else:
        errors["case_type"] = "Case type must be flora or fauna"

    return errors


def parse_draft(payload: Mapping[str, Any]) -> Tuple[Optional[DraftBase], ValidationErrors]:
    """Build a draft from raw input, converting schema errors into the field mapping."""
    try:
        return _draft_adapter.validate_python(payload), {}
    except ValidationError as e:
        errors: ValidationErrors = {}
        for error in e.errors():
            loc = [str(part) for part in error["loc"]]
            # The discriminated union prefixes the tag ("flora"/"fauna") to each location
            if len(loc) > 1 and loc[0] in ("flora", "fauna"):
                loc = loc[1:]
            field = loc[0] if loc else "case_type"
            errors.setdefault(field, error["msg"])
        return None, errors


def validate_payload(payload: Mapping[str, Any]) -> ValidationErrors:
    """Validate raw input that has not been parsed into a draft yet.

    Fields that fail schema parsing are dropped and the rest of the draft is
    still checked against the field rules, so one bad value does not hide the
    other problems. The schema message wins for the fields that failed.
    """
    draft, errors = parse_draft(payload)
    if draft is not None:
        return validate(draft)
    if "case_type" in errors:
        return errors

    remainder = {key: value for key, value in payload.items() if key not in errors}
    try:
        draft = _draft_adapter.validate_python(remainder)
    except ValidationError:
        return errors
    merged = validate(draft)
    merged.update(errors)
    return merged


# ============================================================
# Rule sets
# ============================================================

def _require(draft: DraftBase, errors: ValidationErrors, rules) -> None:
    for field, message in rules:
        if is_blank(getattr(draft, field)):
            errors[field] = message


def _check(errors: ValidationErrors, field: str, parse: Callable[[], Any]) -> None:
    try:
        parse()
    except FieldParseError as e:
        errors[field] = e.message


def _validate_common(draft: DraftBase, errors: ValidationErrors) -> None:
    if draft.activity_type is None:
        errors["activity_type"] = "Activity type is required"
    _require(draft, errors, (
        ("department", "Department is required"),
        ("municipality", "Municipality is required"),
        ("narrative", "Narrative is required"),
    ))


def _validate_reporter(draft: DraftBase, errors: ValidationErrors) -> None:
    if draft.reporter_type == ReporterType.NATURAL_PERSON:
        _require(draft, errors, _NATURAL_PERSON_FIELDS)
    else:
        _require(draft, errors, _LEGAL_ENTITY_FIELDS)


def _validate_coordinates(draft: DraftBase, errors: ValidationErrors) -> None:
    # Each coordinate is optional on its own
    if not is_blank(draft.latitude):
        _check(errors, "latitude", lambda: parse_latitude(draft.latitude))
    if not is_blank(draft.longitude):
        _check(errors, "longitude", lambda: parse_longitude(draft.longitude))


def _validate_flora(draft: FloraProcessDraft, errors: ValidationErrors) -> None:
    _require(draft, errors, (
        ("common_name", "Common name is required"),
        ("scientific_name", "Scientific name is required"),
    ))

    if is_blank(draft.unit_count):
        errors["unit_count"] = "Unit count is required"
    else:
        _check(errors, "unit_count", lambda: parse_positive_int(draft.unit_count, "Unit count"))

    for field, label in (
        ("volume_m3", "Volume"),
        ("weight_kg", "Weight"),
        ("length", "Length"),
        ("width", "Width"),
        ("height", "Height"),
    ):
        raw = getattr(draft, field)
        _check(errors, field, lambda raw=raw, label=label: parse_optional_number(raw, label))

    if draft.has_permit:
        _require(draft, errors, _PERMIT_FIELDS)


def _validate_fauna(draft: FaunaProcessDraft, errors: ValidationErrors) -> None:
    _require(draft, errors, _FAUNA_REQUIRED)
