"""
Country Registry

Export and import countries keyed by country code. Lookups are exact and
case-sensitive; normalizing the caller's input ("us " -> "US") happens
before a Package is built, not here.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from shared.errors import CountryNotEligibleError, ConfigurationError
from shared.models import ExportCountry, ImportCountry


class CountryRegistry:

    def __init__(
        self,
        export_countries: Iterable[ExportCountry],
        import_countries: Iterable[ImportCountry],
    ):
        self._export = MappingProxyType({c.code: c for c in export_countries})
        self._import = MappingProxyType({c.code: c for c in import_countries})

    @property
    def export_countries(self) -> Mapping[str, ExportCountry]:
        return self._export

    @property
    def import_countries(self) -> Mapping[str, ImportCountry]:
        return self._import

    def has_export(self, code: str) -> bool:
        return code in self._export

    def has_import(self, code: str) -> bool:
        return code in self._import

    def resolve_export(self, code: str) -> ExportCountry:
        try:
            return self._export[code]
        except (KeyError, TypeError):
            raise CountryNotEligibleError(code) from None

    def resolve_import(self, code: str) -> ImportCountry:
        try:
            return self._import[code]
        except (KeyError, TypeError):
            raise CountryNotEligibleError(code) from None

    def resolve_zone(self, code: str, rate_tables: Mapping):
        """
        Rate table for the zone an import country is mapped to.

        Raises:
            CountryNotEligibleError: if the country is not an import country
            ConfigurationError: if its zone has no rate table
        """
        country = self.resolve_import(code)
        try:
            return rate_tables[country.zone]
        except KeyError:
            raise ConfigurationError(
                f"Zone '{country.zone}' of country '{code}' has no rate table."
            ) from None
