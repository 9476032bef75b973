"""
Carrier Configuration

An immutable value built once per carrier by create_configuration() and
shared read-only by every calculation afterwards.

OPTIONS
-------
    export_countries               - [{code}] or ExportCountry/str items
    import_countries               - [{code, zone}] or ImportCountry items
    zone_calculators | price_groups
                                   - rate tables, as required by the strategy
    currency                       - default "USD"
    mass_unit                      - unit of maximum_weight and rate tables
    dimensions_unit                - unit of maximum_dimensions
    maximum_weight                 - heaviest accepted package
    maximum_dimensions             - {length, width, height}
    fuel_subcharge_rate            - price group carriers, per whole mass unit
    volumetric_calculation_factor  - zone carriers, default 5000 (cm^3/kg)
    extra_data                     - opaque, carried as-is
    carrier                        - display name

Every problem found is reported at once in a single ConfigurationError.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from shared.arithmetic import Math, DecimalMath
from shared.errors import ConfigurationError, CalculationArithmeticError
from shared.models import Dimensions, ExportCountry, ImportCountry
from shared.rates import RateStrategy, STRATEGIES
from shared.registry import CountryRegistry
from shared.tools import DEFAULT_FACTOR
from shared.units import LengthUnit, MassUnit, parse_unit

logger = logging.getLogger(__name__)


DEFAULT_CURRENCY = "USD"

COMMON_OPTIONS = {
    "carrier",
    "export_countries",
    "import_countries",
    "currency",
    "mass_unit",
    "dimensions_unit",
    "maximum_weight",
    "maximum_dimensions",
    "fuel_subcharge_rate",
    "volumetric_calculation_factor",
    "extra_data",
}


class Configuration(NamedTuple):
    carrier: str
    registry: CountryRegistry
    rate_tables: Mapping[str, Any]
    rate_strategy: RateStrategy
    currency: str
    mass_unit: MassUnit
    dimensions_unit: LengthUnit
    maximum_weight: Decimal
    maximum_dimensions: Dimensions
    fuel_subcharge_rate: Decimal | None = None
    volumetric_divisor_factor: Decimal = DEFAULT_FACTOR
    extra_data: Any = None

    @property
    def export_countries(self) -> Mapping[str, ExportCountry]:
        return self.registry.export_countries

    @property
    def import_countries(self) -> Mapping[str, ImportCountry]:
        return self.registry.import_countries


# =============================================================================
# FACTORY
# =============================================================================

def create_configuration(
    options: Mapping,
    rate_strategy: RateStrategy | str,
    math: Math | None = None,
) -> Configuration:
    """
    Build a Configuration from raw options.

    Args:
        options: Option mapping (see module docstring)
        rate_strategy: RateStrategy instance or its name ("zone", "price_group")
        math: Math used to read numbers (DecimalMath by default)

    Raises:
        ConfigurationError: listing every problem found
    """
    math = math or DecimalMath()
    errors: list[str] = []

    strategy = _resolve_strategy(rate_strategy)
    allowed = COMMON_OPTIONS | {strategy.table_option}
    for key in options:
        if key not in allowed:
            errors.append(f"unknown option '{key}'")

    for key in ("export_countries", "import_countries", strategy.table_option,
                "mass_unit", "dimensions_unit", "maximum_weight", "maximum_dimensions"):
        if options.get(key) is None:
            errors.append(f"option '{key}' is required")
    if errors:
        raise ConfigurationError(_format(errors))

    export_countries = _build_all(options["export_countries"], ExportCountry.from_config, errors)
    import_countries = _build_all(options["import_countries"], ImportCountry.from_config, errors)
    tables = _build_all(
        options[strategy.table_option],
        lambda value: strategy.build_table(value, math),
        errors,
    )
    rate_tables = {table.name: table for table in tables}

    mass_unit = _option(errors, lambda: parse_unit(options["mass_unit"], MassUnit))
    dimensions_unit = _option(errors, lambda: parse_unit(options["dimensions_unit"], LengthUnit))
    maximum_weight = _decimal_option(options, "maximum_weight", math, errors)
    maximum_dimensions = _option(
        errors,
        lambda: Dimensions.from_config(options["maximum_dimensions"], dimensions_unit or LengthUnit.CM, math),
    )
    fuel_subcharge_rate = _decimal_option(options, "fuel_subcharge_rate", math, errors)
    factor = _decimal_option(options, "volumetric_calculation_factor", math, errors)

    if maximum_weight is not None and maximum_weight <= 0:
        errors.append(f"maximum_weight {maximum_weight} must be positive")
    if maximum_dimensions is not None and any(side <= 0 for side in maximum_dimensions.values()):
        errors.append(f"maximum_dimensions {tuple(map(str, maximum_dimensions.values()))} must be positive")

    for country in import_countries:
        if country.zone not in rate_tables:
            errors.append(
                f"import country '{country.code}' is mapped to '{country.zone}' "
                f"which has no entry in {strategy.table_option}"
            )

    currency = options.get("currency") or DEFAULT_CURRENCY
    if not isinstance(currency, str):
        errors.append(f"currency must be a string, got {currency!r}")

    if errors:
        raise ConfigurationError(_format(errors))

    configuration = Configuration(
        carrier=str(options.get("carrier") or strategy.name),
        registry=CountryRegistry(export_countries, import_countries),
        rate_tables=MappingProxyType(rate_tables),
        rate_strategy=strategy,
        currency=currency,
        mass_unit=mass_unit,
        dimensions_unit=dimensions_unit,
        maximum_weight=maximum_weight,
        maximum_dimensions=maximum_dimensions,
        fuel_subcharge_rate=fuel_subcharge_rate,
        volumetric_divisor_factor=factor if factor is not None else DEFAULT_FACTOR,
        extra_data=options.get("extra_data"),
    )

    errors = strategy.configuration_errors(configuration)
    if errors:
        raise ConfigurationError(_format(errors))

    logger.info(
        "Built %s configuration: %d export / %d import countries, %d %s",
        configuration.carrier,
        len(export_countries),
        len(import_countries),
        len(rate_tables),
        strategy.table_option,
    )
    return configuration


# =============================================================================
# HELPERS
# =============================================================================

def _resolve_strategy(rate_strategy) -> RateStrategy:
    if isinstance(rate_strategy, RateStrategy):
        return rate_strategy
    try:
        return STRATEGIES[rate_strategy]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown rate strategy {rate_strategy!r}; expected one of {sorted(STRATEGIES)}."
        ) from None


def _build_all(values, factory, errors: list[str]) -> list:
    if isinstance(values, (str, Mapping)):
        errors.append(f"expected a list, got {type(values).__name__}")
        return []

    built = []
    for value in values:
        item = _option(errors, lambda: factory(value))
        if item is not None:
            built.append(item)
    return built


def _option(errors: list[str], build):
    try:
        return build()
    except ConfigurationError as e:
        errors.append(str(e))
        return None


def _decimal_option(options: Mapping, key: str, math: Math, errors: list[str]) -> Decimal | None:
    value = options.get(key)
    if value is None:
        return None
    try:
        return math.to_decimal(value)
    except CalculationArithmeticError:
        errors.append(f"option '{key}' must be a number, got {value!r}")
        return None


def _format(errors: list[str]) -> str:
    return "Configuration errors:\n  " + "\n  ".join(errors)
