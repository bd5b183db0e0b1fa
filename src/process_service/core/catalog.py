"""Reference lists used as input suggestions.

Suggestions only: validation never checks a value against these lists.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional, Sequence, Union

from process_service.models.process import CaseType, FaunaClass

COLOMBIAN_DEPARTMENTS: Sequence[str] = (
    "Amazonas", "Antioquia", "Arauca", "Atlántico", "Bolívar", "Boyacá",
    "Caldas", "Caquetá", "Casanare", "Cauca", "Cesar", "Chocó", "Córdoba",
    "Cundinamarca", "Guainía", "Guaviare", "Huila", "La Guajira", "Magdalena",
    "Meta", "Nariño", "Norte de Santander", "Putumayo", "Quindío", "Risaralda",
    "San Andrés y Providencia", "Santander", "Sucre", "Tolima", "Valle del Cauca",
    "Vaupés", "Vichada",
)

FAUNA_SPECIES: Dict[FaunaClass, List[str]] = {
    FaunaClass.MAMMAL: [
        "Oso hormiguero", "Perezoso", "Armadillo", "Mono aullador", "Mono araña",
        "Jaguar", "Puma", "Ocelote", "Venado", "Tapir", "Nutria", "Murciélago",
    ],
    FaunaClass.BIRD: [
        "Guacamaya", "Loro", "Tucán", "Águila", "Halcón", "Búho", "Colibrí",
        "Cóndor", "Pelícano", "Garza", "Ibis", "Flamenco",
    ],
    FaunaClass.REPTILE: [
        "Iguana", "Boa", "Anaconda", "Caimán", "Tortuga", "Gecko", "Lagarto",
        "Serpiente coral", "Cascabel", "Tortuga carey",
    ],
    FaunaClass.FISH: [
        "Bagre", "Bocachico", "Dorado", "Sábalo", "Tilapia", "Trucha",
        "Pez ángel", "Piraña", "Raya", "Tiburón",
    ],
    FaunaClass.AMPHIBIAN: [
        "Rana venenosa", "Salamandra", "Tritón", "Rana arbórea", "Sapo",
        "Cecilia", "Rana de cristal",
    ],
    FaunaClass.INVERTEBRATE: [
        "Mariposa", "Escarabajo", "Araña", "Escorpión", "Libélula",
        "Hormiga", "Abeja", "Caracol", "Cangrejo",
    ],
}

FLORA_SPECIES: List[str] = [
    "Cedro", "Caoba", "Abarco", "Roble", "Guayacán", "Nogal", "Sajo",
    "Cativo", "Pino", "Eucalipto", "Teca", "Mangle",
]

TaxonKey = Union[FaunaClass, CaseType]


class CatalogService(ABC):
    """Read-only reference data."""

    @abstractmethod
    def suggested_species_names(self, taxon: TaxonKey) -> List[str]:
        """Common names to suggest for a fauna class (or CaseType.FLORA for timber)."""
        pass

    @abstractmethod
    def administrative_regions(self) -> FrozenSet[str]:
        pass


class StaticCatalogService(CatalogService):
    """Catalog backed by the built-in Colombian lists."""

    def __init__(
        self,
        departments: Optional[Sequence[str]] = None,
        fauna_species: Optional[Dict[FaunaClass, List[str]]] = None,
        flora_species: Optional[List[str]] = None,
    ):
        self._departments = tuple(departments or COLOMBIAN_DEPARTMENTS)
        self._fauna_species = fauna_species or FAUNA_SPECIES
        self._flora_species = flora_species or FLORA_SPECIES

    def suggested_species_names(self, taxon: TaxonKey) -> List[str]:
        if taxon == CaseType.FLORA:
            return list(self._flora_species)
        if taxon == CaseType.FAUNA:
            return [name for names in self._fauna_species.values() for name in names]
        return list(self._fauna_species.get(FaunaClass(taxon), []))

    def administrative_regions(self) -> FrozenSet[str]:
        return frozenset(self._departments)
