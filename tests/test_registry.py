"""
Unit Tests for the Country Registry

Run with: pytest tests/test_registry.py -v
"""

import pytest

from shared.errors import CountryNotEligibleError, ConfigurationError
from shared.models import ExportCountry, ImportCountry
from shared.registry import CountryRegistry


@pytest.fixture
def registry():
    return CountryRegistry(
        [ExportCountry("US"), ExportCountry("CA")],
        [ImportCountry("DE", "1"), ImportCountry("JP", "2"), ImportCountry("BR", "9")],
    )


class TestCountryRegistry:

    def test_membership(self, registry):
        assert registry.has_export("US")
        assert not registry.has_export("DE")
        assert registry.has_import("JP")
        assert not registry.has_import("US")

    def test_lookup_is_case_sensitive(self, registry):
        assert not registry.has_export("us")
        with pytest.raises(CountryNotEligibleError):
            registry.resolve_import("de")

    def test_resolve_import(self, registry):
        assert registry.resolve_import("DE") == ImportCountry("DE", "1")

    def test_unknown_country(self, registry):
        with pytest.raises(CountryNotEligibleError) as exc_info:
            registry.resolve_export("XX")
        assert exc_info.value.code == "XX"
        assert isinstance(exc_info.value, LookupError)

    def test_resolve_zone(self, registry):
        tables = {"1": "table one", "2": "table two"}
        assert registry.resolve_zone("JP", tables) == "table two"

    def test_zone_without_table_is_configuration_error(self, registry):
        """BR maps to zone 9 which has no table: a setup defect, not ineligibility."""
        with pytest.raises(ConfigurationError, match="Zone '9'"):
            registry.resolve_zone("BR", {"1": "table one"})

    def test_mappings_are_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.import_countries["FR"] = ImportCountry("FR", "1")
        assert sorted(registry.export_countries) == ["CA", "US"]


class TestCountryFromConfig:

    def test_export_forms(self):
        assert ExportCountry.from_config("US") == ExportCountry("US")
        assert ExportCountry.from_config({"code": "US"}) == ExportCountry("US")
        assert ExportCountry.from_config(ExportCountry("US")) == ExportCountry("US")

    def test_import_zone_or_price_group(self):
        assert ImportCountry.from_config({"code": "GB", "zone": 3}) == ImportCountry("GB", "3")
        assert ImportCountry.from_config({"code": "GB", "price_group": "3"}) == ImportCountry("GB", "3")

    def test_import_without_zone(self):
        with pytest.raises(ConfigurationError):
            ImportCountry.from_config({"code": "GB"})

    @pytest.mark.parametrize("value", [{}, {"code": ""}, ["US"], None])
    def test_missing_code(self, value):
        with pytest.raises(ConfigurationError):
            ExportCountry.from_config(value)
