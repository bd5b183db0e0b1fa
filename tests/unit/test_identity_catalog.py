"""Unit tests for identity providers and the suggestion catalog."""

import pytest

from process_service.core.catalog import COLOMBIAN_DEPARTMENTS, FAUNA_SPECIES, StaticCatalogService
from process_service.core.identity import (
    DEMO_USERS,
    DemoIdentityProvider,
    HeaderIdentityProvider,
    UserRole,
)
from process_service.models import CaseType
from process_service.models.process import FaunaClass


@pytest.mark.unit
class TestIdentity:

    def test_demo_provider_defaults_to_demo_user(self):
        provider = DemoIdentityProvider()
        assert provider.current_user().name == "Usuario Demo"
        assert not provider.is_live_mode()

    def test_demo_provider_with_chosen_user(self):
        admin = DEMO_USERS[0]
        assert DemoIdentityProvider(admin).current_user().role == UserRole.ADMIN

    def test_headers_build_identity(self):
        provider = HeaderIdentityProvider("u-1", name="Ana", email="ana@example.org", role="admin")
        user = provider.current_user()
        assert (user.id, user.name, user.email, user.role) == ("u-1", "Ana", "ana@example.org", UserRole.ADMIN)
        assert provider.is_live_mode()

    def test_unknown_role_falls_back_to_volunteer(self):
        user = HeaderIdentityProvider("u-1", role="superuser").current_user()
        assert user.role == UserRole.VOLUNTEER
        assert user.name == "u-1"

    def test_missing_header_live_mode(self):
        provider = HeaderIdentityProvider(None, live_mode=True, fallback=DEMO_USERS[-1])
        assert provider.current_user() is None

    def test_missing_header_demo_mode(self):
        provider = HeaderIdentityProvider(None, live_mode=False, fallback=DEMO_USERS[-1])
        assert provider.current_user() == DEMO_USERS[-1]


@pytest.mark.unit
class TestCatalog:

    def test_regions(self):
        regions = StaticCatalogService().administrative_regions()
        assert len(regions) == 32
        assert regions == frozenset(COLOMBIAN_DEPARTMENTS)

    def test_species_per_fauna_class(self):
        catalog = StaticCatalogService()
        for taxclass in FaunaClass:
            assert catalog.suggested_species_names(taxclass) == FAUNA_SPECIES[taxclass]

    def test_fauna_and_flora_lists(self):
        catalog = StaticCatalogService()
        fauna = catalog.suggested_species_names(CaseType.FAUNA)
        assert len(fauna) == sum(len(names) for names in FAUNA_SPECIES.values())
        assert "Cedro" in catalog.suggested_species_names(CaseType.FLORA)

    def test_custom_lists(self):
        catalog = StaticCatalogService(departments=["Meta"], flora_species=["Moriche"])
        assert catalog.administrative_regions() == frozenset({"Meta"})
        assert catalog.suggested_species_names(CaseType.FLORA) == ["Moriche"]

    def test_returned_lists_are_copies(self):
        catalog = StaticCatalogService()
        names = catalog.suggested_species_names(FaunaClass.BIRD)
        names.append("Dodo")
        assert "Dodo" not in catalog.suggested_species_names(FaunaClass.BIRD)
