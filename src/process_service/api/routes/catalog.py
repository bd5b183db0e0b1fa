"""Catalog API routes: suggestion lists for the field forms."""

from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException, status

from process_service.core.catalog import CatalogService, StaticCatalogService
from process_service.models.process import CaseType, FaunaClass

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])

_catalog = StaticCatalogService()


def get_catalog_service() -> CatalogService:
    return _catalog


@router.get(
    "/departments",
    response_model=List[str],
    summary="List administrative regions",
)
async def list_departments(catalog: CatalogService = Depends(get_catalog_service)):
    """Colombian departments, sorted. Suggestions only; not enforced on drafts."""
    return sorted(catalog.administrative_regions())


@router.get(
    "/species/{taxon}",
    response_model=List[str],
    summary="Suggested species names",
    description="""
`taxon` is `flora`, `fauna` (every fauna class) or a fauna class
(`mammal`, `bird`, `reptile`, `fish`, `amphibian`, `invertebrate`).
    """,
    responses={404: {"description": "Unknown taxon"}},
)
async def list_species(taxon: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Common names to suggest for a taxon."""
    key: Union[CaseType, FaunaClass]
    try:
        key = CaseType(taxon)
    except ValueError:
        try:
            key = FaunaClass(taxon)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown taxon '{taxon}'",
            )
    return catalog.suggested_species_names(key)
