"""Draft models: what a field form submits before validation.

Numeric and coordinate inputs stay as raw text here. ``core.validation``
checks them and ``core.assembly`` turns a clean draft into a typed process.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from process_service.models.process import (
    ActivityType,
    DimensionUnit,
    FaunaClass,
    FloraProductType,
    ReporterType,
    SpecimenSex,
    SpecimenState,
)


class DraftBase(BaseModel):
    """Fields common to both forms."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    activity_type: Optional[ActivityType] = ActivityType.SEIZURE
    occurred_at: Optional[datetime] = None

    # Location
    department: str = ""
    municipality: str = ""
    village: str = ""
    latitude: str = ""
    longitude: str = ""

    narrative: str = ""

    # Reporter
    reporter_type: ReporterType = ReporterType.NATURAL_PERSON
    reporter_name: str = ""
    reporter_document: str = ""
    reporter_contact: str = ""
    company_name: str = ""
    tax_id: str = ""
    legal_representative: str = ""
    company_contact: str = ""

    photos: List[str] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def blank_text_for_none(cls, v, info: ValidationInfo):
        """A form sends null for an empty text box; treat it as blank."""
        if v is None and cls.model_fields[info.field_name].annotation is str:
            return ""
        return v


class FloraProcessDraft(DraftBase):
    """Flora form input."""

    case_type: Literal["flora"] = "flora"

    product_type: FloraProductType = FloraProductType.BLOCKS
    common_name: str = ""
    scientific_name: str = ""

    volume_m3: str = ""
    weight_kg: str = ""
    unit_count: str = ""
    length: str = ""
    width: str = ""
    height: str = ""
    dimension_unit: DimensionUnit = DimensionUnit.CM

    has_permit: bool = False
    permit_number: str = ""
    permit_valid_until: str = ""
    permit_origin: str = ""
    permit_destination: str = ""
    vehicle_plate: str = ""


class FaunaProcessDraft(DraftBase):
    """Fauna form input."""

    case_type: Literal["fauna"] = "fauna"

    common_name: str = ""
    scientific_name: str = ""
    taxclass: FaunaClass = FaunaClass.MAMMAL
    specimen_state: SpecimenState = SpecimenState.ALIVE
    sex: SpecimenSex = SpecimenSex.UNKNOWN

    physical_condition: str = ""
    behavior: str = ""
    packaging_description: str = ""

    videos: List[str] = Field(default_factory=list)


ProcessDraft = Annotated[
    Union[FloraProcessDraft, FaunaProcessDraft],
    Field(discriminator="case_type"),
]
