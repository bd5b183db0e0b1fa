"""Process data models for the flora/fauna enforcement service.

A process is one enforcement case: a seizure, voluntary surrender or
restitution of a flora product or a fauna specimen. The two case types share
the fields of ``ProcessBase`` and differ only in their ``details`` payload.

Key Models:
- ProcessStatus: chain-of-custody lifecycle (see ``core.lifecycle``)
- Reporter: natural person or legal entity, tagged by ``type``
- FloraProcess / FaunaProcess: tagged by ``case_type``; ``Process`` is the union
- StatusTransition: audit record appended on every status change
- ProcessStats: aggregate counts with every enum key present
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# Enumerations
# ============================================================

class ProcessStatus(str, Enum):
    """
    Process lifecycle status.

    Lifecycle Flow:
      INITIATED → PENDING_PICKUP → TEMPORARY_CUSTODY → LEGAL_PROCESS
                                                     → CLOSED_RELEASED (terminal)
                                                     → CLOSED_FINAL_DISPOSITION (terminal)

    Terminal States: CLOSED_RELEASED, CLOSED_FINAL_DISPOSITION
    """

    INITIATED = "initiated"
    PENDING_PICKUP = "pending_pickup"
    TEMPORARY_CUSTODY = "temporary_custody"
    LEGAL_PROCESS = "legal_process"
    CLOSED_RELEASED = "closed_released"
    CLOSED_FINAL_DISPOSITION = "closed_final_disposition"

    @property
    def is_terminal(self) -> bool:
        """Check if this status is terminal"""
        return self in (ProcessStatus.CLOSED_RELEASED, ProcessStatus.CLOSED_FINAL_DISPOSITION)

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    ProcessStatus.INITIATED: "Iniciado",
    ProcessStatus.PENDING_PICKUP: "Pendiente Recogida",
    ProcessStatus.TEMPORARY_CUSTODY: "Custodia Temporal",
    ProcessStatus.LEGAL_PROCESS: "Proceso Legal",
    ProcessStatus.CLOSED_RELEASED: "Liberado",
    ProcessStatus.CLOSED_FINAL_DISPOSITION: "Disposición Final",
}


class CaseType(str, Enum):
    """Which detail payload a process carries."""

    FLORA = "flora"
    FAUNA = "fauna"

    @property
    def label(self) -> str:
        return "Flora" if self is CaseType.FLORA else "Fauna"

    @property
    def id_prefix(self) -> str:
        return "FL" if self is CaseType.FLORA else "FA"


class ActivityType(str, Enum):
    """How the case originated."""

    SEIZURE = "seizure"
    VOLUNTARY_SURRENDER = "voluntary_surrender"
    RESTITUTION = "restitution"

    @property
    def label(self) -> str:
        return _ACTIVITY_LABELS[self]


_ACTIVITY_LABELS = {
    ActivityType.SEIZURE: "Incautación",
    ActivityType.VOLUNTARY_SURRENDER: "Entrega Voluntaria",
    ActivityType.RESTITUTION: "Restitución",
}


class FloraProductType(str, Enum):
    BLOCKS = "blocks"
    PLANKS = "planks"
    FIREWOOD = "firewood"
    CHARCOAL = "charcoal"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _PRODUCT_LABELS[self]


_PRODUCT_LABELS = {
    FloraProductType.BLOCKS: "Bloques",
    FloraProductType.PLANKS: "Tablas",
    FloraProductType.FIREWOOD: "Leña",
    FloraProductType.CHARCOAL: "Carbón",
    FloraProductType.OTHER: "Otros",
}


class FaunaClass(str, Enum):
    MAMMAL = "mammal"
    BIRD = "bird"
    REPTILE = "reptile"
    FISH = "fish"
    AMPHIBIAN = "amphibian"
    INVERTEBRATE = "invertebrate"

    @property
    def label(self) -> str:
        return _FAUNA_CLASS_LABELS[self]


_FAUNA_CLASS_LABELS = {
    FaunaClass.MAMMAL: "Mamífero",
    FaunaClass.BIRD: "Ave",
    FaunaClass.REPTILE: "Reptil",
    FaunaClass.FISH: "Pez",
    FaunaClass.AMPHIBIAN: "Anfibio",
    FaunaClass.INVERTEBRATE: "Invertebrado",
}


class SpecimenState(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"
    INJURED = "injured"


class SpecimenSex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class DimensionUnit(str, Enum):
    CM = "cm"
    M = "m"


class ReporterType(str, Enum):
    NATURAL_PERSON = "natural_person"
    LEGAL_ENTITY = "legal_entity"


# ============================================================
# Shared value objects
# ============================================================

class Coordinates(BaseModel):
    """Geographic point; both halves are always present together."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Location(BaseModel):
    """Where the event happened."""

    department: str = Field(min_length=1, description="Administrative region")
    municipality: str = Field(min_length=1)
    village: Optional[str] = Field(default=None, description="Vereda")
    coordinates: Optional[Coordinates] = None


class NaturalPersonReporter(BaseModel):
    type: Literal["natural_person"] = "natural_person"
    name: str = Field(min_length=1)
    id_document: str = Field(min_length=1)
    contact: str = Field(min_length=1)


class LegalEntityReporter(BaseModel):
    type: Literal["legal_entity"] = "legal_entity"
    company_name: str = Field(min_length=1)
    tax_id: str = Field(min_length=1, description="NIT")
    legal_representative: str = Field(min_length=1)
    contact: str = Field(min_length=1)


Reporter = Annotated[
    Union[NaturalPersonReporter, LegalEntityReporter],
    Field(discriminator="type"),
]


class Media(BaseModel):
    """Ordered references to stored photos and videos."""

    photos: List[str] = Field(default_factory=list)
    videos: Optional[List[str]] = None


# ============================================================
# Flora details
# ============================================================

class FloraIdentification(BaseModel):
    product_type: FloraProductType
    common_name: str = Field(min_length=1)
    scientific_name: str = Field(min_length=1)


class Dimensions(BaseModel):
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    unit: DimensionUnit = DimensionUnit.CM


class FloraQuantification(BaseModel):
    volume_m3: Optional[float] = None
    weight_kg: Optional[float] = None
    unit_count: int = Field(gt=0)
    dimensions: Optional[Dimensions] = None


class Permit(BaseModel):
    """Transport permit (SUNL) accompanying forest products."""

    permit_number: str = Field(min_length=1)
    valid_until: str = Field(min_length=1)
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    vehicle_plate: str = Field(min_length=1)


class FloraDetails(BaseModel):
    identification: FloraIdentification
    quantification: FloraQuantification
    permit: Optional[Permit] = None
    media: Media = Field(default_factory=Media)


# ============================================================
# Fauna details
# ============================================================

class FaunaIdentification(BaseModel):
    common_name: str = Field(min_length=1)
    scientific_name: str = Field(min_length=1)
    taxclass: FaunaClass
    specimen_state: SpecimenState
    sex: SpecimenSex = SpecimenSex.UNKNOWN


class InitialAssessment(BaseModel):
    physical_condition: str = Field(min_length=1)
    behavior: str = Field(min_length=1, description="e.g. aggressive, lethargic, disoriented")


class Packaging(BaseModel):
    description: str = Field(min_length=1, description="Box, crate, kennel, ventilation")


class FaunaDetails(BaseModel):
    identification: FaunaIdentification
    initial_assessment: InitialAssessment
    packaging: Packaging
    media: Media = Field(default_factory=Media)


# ============================================================
# Process
# ============================================================

class StatusTransition(BaseModel):
    """
    Record of one status change.
    Provides audit trail for the chain of custody.
    """

    from_status: ProcessStatus
    to_status: ProcessStatus
    triggered_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    triggered_by: str = Field(description="User ID that requested the change")
    reason: str = Field(default="", max_length=500)

    model_config = ConfigDict(frozen=True)


class ProcessBase(BaseModel):
    """Fields shared by flora and fauna processes."""

    id: str = Field(min_length=1)
    activity_type: ActivityType
    occurred_at: datetime
    location: Location
    narrative: str = Field(min_length=1)
    reporter: Reporter
    status: ProcessStatus = ProcessStatus.INITIATED
    status_history: List[StatusTransition] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    created_by: str

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


class FloraProcess(ProcessBase):
    case_type: Literal["flora"] = "flora"
    details: FloraDetails


class FaunaProcess(ProcessBase):
    case_type: Literal["fauna"] = "fauna"
    details: FaunaDetails


Process = Annotated[
    Union[FloraProcess, FaunaProcess],
    Field(discriminator="case_type"),
]


# ============================================================
# Statistics
# ============================================================

class ProcessStats(BaseModel):
    """Aggregate counts over a process collection.

    ``by_status`` and ``by_activity`` always carry every enum key.
    """

    total: int = 0
    by_type: Dict[CaseType, int] = Field(
        default_factory=lambda: {case_type: 0 for case_type in CaseType}
    )
    by_status: Dict[ProcessStatus, int] = Field(
        default_factory=lambda: {status: 0 for status in ProcessStatus}
    )
    by_activity: Dict[ActivityType, int] = Field(
        default_factory=lambda: {activity: 0 for activity in ActivityType}
    )
