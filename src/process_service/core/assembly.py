"""Turn a validated draft into typed process parts.

Callers must validate first; parse errors here mean the draft was never
checked and surface as FieldParseError.
"""

from datetime import datetime
from typing import Optional

from process_service.core.parsing import (
    is_blank,
    parse_latitude,
    parse_longitude,
    parse_optional_number,
    parse_positive_int,
)
from process_service.models.drafts import DraftBase, FaunaProcessDraft, FloraProcessDraft
from process_service.models.process import (
    Coordinates,
    Dimensions,
    FaunaDetails,
    FaunaIdentification,
    FaunaProcess,
    FloraDetails,
    FloraIdentification,
    FloraProcess,
    FloraQuantification,
    InitialAssessment,
    LegalEntityReporter,
    Location,
    Media,
    NaturalPersonReporter,
    Packaging,
    Permit,
    ProcessStatus,
    ReporterType,
)


def _optional_text(value: str) -> Optional[str]:
    return None if is_blank(value) else value.strip()


def build_location(draft: DraftBase) -> Location:
    coordinates = None
    # Coordinates count as present only when both halves are given
    if not is_blank(draft.latitude) and not is_blank(draft.longitude):
        coordinates = Coordinates(
            latitude=parse_latitude(draft.latitude),
            longitude=parse_longitude(draft.longitude),
        )
    return Location(
        department=draft.department.strip(),
        municipality=draft.municipality.strip(),
        village=_optional_text(draft.village),
        coordinates=coordinates,
    )


def build_reporter(draft: DraftBase):
    if draft.reporter_type == ReporterType.NATURAL_PERSON:
        return NaturalPersonReporter(
            name=draft.reporter_name.strip(),
            id_document=draft.reporter_document.strip(),
            contact=draft.reporter_contact.strip(),
        )
    return LegalEntityReporter(
        company_name=draft.company_name.strip(),
        tax_id=draft.tax_id.strip(),
        legal_representative=draft.legal_representative.strip(),
        contact=draft.company_contact.strip(),
    )


def build_flora_details(draft: FloraProcessDraft) -> FloraDetails:
    dimensions = None
    if not (is_blank(draft.length) and is_blank(draft.width) and is_blank(draft.height)):
        dimensions = Dimensions(
            length=parse_optional_number(draft.length, "Length"),
            width=parse_optional_number(draft.width, "Width"),
            height=parse_optional_number(draft.height, "Height"),
            unit=draft.dimension_unit,
        )

    permit = None
    if draft.has_permit:
        permit = Permit(
            permit_number=draft.permit_number.strip(),
            valid_until=draft.permit_valid_until.strip(),
            origin=draft.permit_origin.strip(),
            destination=draft.permit_destination.strip(),
            vehicle_plate=draft.vehicle_plate.strip(),
        )

    return FloraDetails(
        identification=FloraIdentification(
            product_type=draft.product_type,
            common_name=draft.common_name.strip(),
            scientific_name=draft.scientific_name.strip(),
        ),
        quantification=FloraQuantification(
            volume_m3=parse_optional_number(draft.volume_m3, "Volume"),
            weight_kg=parse_optional_number(draft.weight_kg, "Weight"),
            unit_count=parse_positive_int(draft.unit_count, "Unit count"),
            dimensions=dimensions,
        ),
        permit=permit,
        media=Media(photos=list(draft.photos)),
    )


def build_fauna_details(draft: FaunaProcessDraft) -> FaunaDetails:
    return FaunaDetails(
        identification=FaunaIdentification(
            common_name=draft.common_name.strip(),
            scientific_name=draft.scientific_name.strip(),
            taxclass=draft.taxclass,
            specimen_state=draft.specimen_state,
            sex=draft.sex,
        ),
        initial_assessment=InitialAssessment(
            physical_condition=draft.physical_condition.strip(),
            behavior=draft.behavior.strip(),
        ),
        packaging=Packaging(description=draft.packaging_description.strip()),
        media=Media(
            photos=list(draft.photos),
            videos=list(draft.videos) if draft.videos else None,
        ),
    )


def build_process(
    draft: DraftBase,
    process_id: str,
    created_by: str,
    now: datetime,
):
    """Assemble a new process in the INITIATED state."""
    common = dict(
        id=process_id,
        activity_type=draft.activity_type,
        occurred_at=draft.occurred_at or now,
        location=build_location(draft),
        narrative=draft.narrative.strip(),
        reporter=build_reporter(draft),
        status=ProcessStatus.INITIATED,
        created_at=now,
        updated_at=now,
        created_by=created_by,
    )
    if isinstance(draft, FloraProcessDraft):
        return FloraProcess(details=build_flora_details(draft), **common)
    return FaunaProcess(details=build_fauna_details(draft), **common)
