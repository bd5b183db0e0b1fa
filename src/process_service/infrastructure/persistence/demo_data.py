"""Demo-mode seed processes.

Two flora and three fauna cases spread over the lifecycle, used to populate
the in-memory store when ``settings.seed_demo_data`` is on.
"""

from typing import List

from pydantic import TypeAdapter

from process_service.models.process import Process

_adapter: TypeAdapter = TypeAdapter(List[Process])

_DEMO_PROCESSES = [
    {
        "id": "FL001",
        "case_type": "flora",
        "activity_type": "seizure",
        "occurred_at": "2024-01-15T10:30:00Z",
        "location": {
            "department": "Antioquia",
            "municipality": "Medellín",
            "village": "La Macarena",
            "coordinates": {"latitude": 6.2442, "longitude": -75.5812},
        },
        "narrative": (
            "Incautación de madera de cedro sin documentación legal en vía pública. "
            "El material se encontraba siendo transportado en camión sin placas visibles."
        ),
        "reporter": {
            "type": "natural_person",
            "name": "Carlos Rodríguez Pérez",
            "id_document": "43.567.890",
            "contact": "3001234567",
        },
        "status": "temporary_custody",
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-16T14:20:00Z",
        "created_by": "admin_demo",
        "details": {
            "identification": {
                "product_type": "planks",
                "common_name": "Cedro",
                "scientific_name": "Cedrela odorata",
            },
            "quantification": {
                "volume_m3": 2.5,
                "weight_kg": 1800,
                "unit_count": 15,
                "dimensions": {"length": 300, "width": 20, "height": 5, "unit": "cm"},
            },
            "media": {
                "photos": [
                    "/assets/evidence/flora_001_1.jpg",
                    "/assets/evidence/flora_001_2.jpg",
                ],
            },
        },
    },
    {
        "id": "FL002",
        "case_type": "flora",
        "activity_type": "voluntary_surrender",
        "occurred_at": "2024-01-20T09:15:00Z",
        "location": {
            "department": "Cundinamarca",
            "municipality": "Bogotá",
            "village": "Centro",
            "coordinates": {"latitude": 4.6097, "longitude": -74.0817},
        },
        "narrative": (
            "Entrega voluntaria de carbón vegetal por parte de comerciante que "
            "decidió cambiar de actividad económica."
        ),
        "reporter": {
            "type": "legal_entity",
            "company_name": "Carbones del Valle S.A.S.",
            "tax_id": "900.123.456-7",
            "legal_representative": "María González",
            "contact": "3109876543",
        },
        "status": "closed_final_disposition",
        "created_at": "2024-01-20T09:15:00Z",
        "updated_at": "2024-01-25T16:45:00Z",
        "created_by": "inspector_demo",
        "details": {
            "identification": {
                "product_type": "charcoal",
                "common_name": "Carbón de Eucalipto",
                "scientific_name": "Eucalyptus globulus",
            },
            "quantification": {"weight_kg": 500, "unit_count": 20},
            "permit": {
                "permit_number": "SUNL-2024-001234",
                "valid_until": "2024-02-01",
                "origin": "Cundinamarca - Soacha",
                "destination": "Cundinamarca - Bogotá",
                "vehicle_plate": "ABC-123",
            },
            "media": {"photos": ["/assets/evidence/flora_002_1.jpg"]},
        },
    },
    {
        "id": "FA001",
        "case_type": "fauna",
        "activity_type": "seizure",
        "occurred_at": "2024-01-18T14:20:00Z",
        "location": {
            "department": "Valle del Cauca",
            "municipality": "Cali",
            "village": "El Poblado",
            "coordinates": {"latitude": 3.4516, "longitude": -76.5320},
        },
        "narrative": (
            "Incautación de guacamaya azul y amarilla mantenida en cautiverio ilegal "
            "en residencia particular. El animal presentaba signos de estrés y malnutrición."
        ),
        "reporter": {
            "type": "natural_person",
            "name": "Ana Lucía Martínez",
            "id_document": "52.789.123",
            "contact": "3157894561",
        },
        "status": "legal_process",
        "created_at": "2024-01-18T14:20:00Z",
        "updated_at": "2024-01-22T11:30:00Z",
        "created_by": "veterinario_demo",
        "details": {
            "identification": {
                "common_name": "Guacamaya Azul y Amarilla",
                "scientific_name": "Ara ararauna",
                "taxclass": "bird",
                "specimen_state": "alive",
                "sex": "female",
            },
            "initial_assessment": {
                "physical_condition": (
                    "Presenta signos de malnutrición, plumaje opaco, peso por debajo "
                    "del promedio normal para la especie."
                ),
                "behavior": (
                    "Letárgico, poco reactivo a estímulos externos, comportamiento "
                    "estereotipado de balanceo."
                ),
            },
            "packaging": {
                "description": (
                    "Transportado en guacal de madera con ventilación adecuada, forrado "
                    "con material absorbente."
                ),
            },
            "media": {
                "photos": [
                    "/assets/evidence/fauna_001_1.jpg",
                    "/assets/evidence/fauna_001_2.jpg",
                    "/assets/evidence/fauna_001_3.jpg",
                ],
                "videos": ["/assets/evidence/fauna_001_video.mp4"],
            },
        },
    },
    {
        "id": "FA002",
        "case_type": "fauna",
        "activity_type": "restitution",
        "occurred_at": "2024-01-25T08:45:00Z",
        "location": {
            "department": "Amazonas",
            "municipality": "Leticia",
            "village": "Puerto Nariño",
            "coordinates": {"latitude": -4.2151, "longitude": -69.9406},
        },
        "narrative": (
            "Restitución al hábitat natural de perezoso de tres dedos que fue "
            "rehabilitado después de ser encontrado herido en carretera."
        ),
        "reporter": {
            "type": "legal_entity",
            "company_name": "Fundación Amazonía Verde",
            "tax_id": "800.456.789-1",
            "legal_representative": "Dr. Roberto Silva",
            "contact": "3201234567",
        },
        "status": "closed_released",
        "created_at": "2024-01-25T08:45:00Z",
        "updated_at": "2024-01-25T16:20:00Z",
        "created_by": "biologo_demo",
        "details": {
            "identification": {
                "common_name": "Perezoso de Tres Dedos",
                "scientific_name": "Bradypus variegatus",
                "taxclass": "mammal",
                "specimen_state": "alive",
                "sex": "male",
            },
            "initial_assessment": {
                "physical_condition": (
                    "Completamente recuperado, peso normal, heridas cicatrizadas."
                ),
                "behavior": "Activo, respuesta normal a estímulos.",
            },
            "packaging": {
                "description": (
                    "Contenedor especial para liberación, con mínimo contacto humano."
                ),
            },
            "media": {
                "photos": [
                    "/assets/evidence/fauna_002_1.jpg",
                    "/assets/evidence/fauna_002_2.jpg",
                ],
                "videos": ["/assets/evidence/fauna_002_liberation.mp4"],
            },
        },
    },
    {
        "id": "FA003",
        "case_type": "fauna",
        "activity_type": "seizure",
        "occurred_at": "2024-01-28T16:10:00Z",
        "location": {
            "department": "Chocó",
            "municipality": "Quibdó",
            "village": "La Playita",
            "coordinates": {"latitude": 5.6947, "longitude": -76.6581},
        },
        "narrative": (
            "Incautación de boa constrictor mantenida como mascota en condiciones "
            "inadecuadas. El reptil presentaba problemas de muda y deshidratación."
        ),
        "reporter": {
            "type": "natural_person",
            "name": "Luis Fernando Mosquera",
            "id_document": "71.234.567",
            "contact": "3186547892",
        },
        "status": "temporary_custody",
        "created_at": "2024-01-28T16:10:00Z",
        "updated_at": "2024-01-29T10:15:00Z",
        "created_by": "inspector_demo",
        "details": {
            "identification": {
                "common_name": "Boa Constrictor",
                "scientific_name": "Boa constrictor",
                "taxclass": "reptile",
                "specimen_state": "alive",
                "sex": "unknown",
            },
            "initial_assessment": {
                "physical_condition": (
                    "Deshidratación moderada, problemas en el proceso de muda, escamas retenidas."
                ),
                "behavior": "Defensivo pero no agresivo, actividad reducida.",
            },
            "packaging": {
                "description": (
                    "Terrario temporal con control de temperatura y humedad, "
                    "sustrato adecuado y ventilación controlada."
                ),
            },
            "media": {
                "photos": [
                    "/assets/evidence/fauna_003_1.jpg",
                    "/assets/evidence/fauna_003_2.jpg",
                ],
            },
        },
    },
]


def demo_processes() -> List:
    """Fresh copies of the demo processes."""
    return _adapter.validate_python(_DEMO_PROCESSES)
