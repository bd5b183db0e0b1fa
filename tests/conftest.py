"""Shared fixtures for process service tests."""

import pytest

from process_service.core.identity import DEMO_USERS
from process_service.core.process_manager import ProcessManager
from process_service.infrastructure.persistence import InMemoryProcessRepository, demo_processes
from process_service.models import FaunaProcessDraft, FloraProcessDraft


@pytest.fixture
def flora_payload():
    """Valid flora form input (checkpoint seizure of cedar planks)."""
    return {
        "case_type": "flora",
        "activity_type": "seizure",
        "department": "Antioquia",
        "municipality": "Medellín",
        "narrative": "Seized at checkpoint",
        "reporter_type": "natural_person",
        "reporter_name": "Carlos Rodríguez Pérez",
        "reporter_document": "43567890",
        "reporter_contact": "3001234567",
        "product_type": "planks",
        "common_name": "Cedro",
        "scientific_name": "Cedrela odorata",
        "unit_count": "15",
    }


@pytest.fixture
def fauna_payload():
    """Valid fauna form input (macaw kept as a pet)."""
    return {
        "case_type": "fauna",
        "activity_type": "voluntary_surrender",
        "department": "Valle del Cauca",
        "municipality": "Cali",
        "narrative": "Macaw surrendered by owner",
        "reporter_type": "legal_entity",
        "company_name": "Fundación Amazonía Verde",
        "tax_id": "800.456.789-1",
        "legal_representative": "Roberto Silva",
        "company_contact": "3201234567",
        "common_name": "Guacamaya",
        "scientific_name": "Ara ararauna",
        "taxclass": "bird",
        "specimen_state": "alive",
        "sex": "female",
        "physical_condition": "Dull plumage, underweight",
        "behavior": "Lethargic",
        "packaging_description": "Ventilated wooden crate",
    }


@pytest.fixture
def flora_draft(flora_payload):
    return FloraProcessDraft(**flora_payload)


@pytest.fixture
def fauna_draft(fauna_payload):
    return FaunaProcessDraft(**fauna_payload)


@pytest.fixture
def actor():
    """Researcher demo user."""
    return DEMO_USERS[1]


@pytest.fixture
def repository():
    return InMemoryProcessRepository()


@pytest.fixture
def seeded_repository():
    return InMemoryProcessRepository(demo_processes())


@pytest.fixture
def manager(repository):
    return ProcessManager(repository, timeout=1.0)
