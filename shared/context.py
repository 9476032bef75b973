"""
Calculation Context

Everything a check or a rate strategy needs besides the package: the
configuration and the tools built for it. Built once per engine.
"""

from typing import NamedTuple, TYPE_CHECKING

from shared.arithmetic import Math, DecimalMath
from shared.tools import DimensionsNormalizer, VolumetricWeightCalculator
from shared.units import UnitConverter, create_length_converter, create_weight_converter

if TYPE_CHECKING:
    from shared.engine.configuration import Configuration


class CalculationContext(NamedTuple):
    configuration: "Configuration"
    math: Math
    length_converter: UnitConverter
    weight_converter: UnitConverter
    dimensions_normalizer: DimensionsNormalizer
    volumetric_weight_calculator: VolumetricWeightCalculator


def create_context(
    configuration,
    math: Math | None = None,
    length_converter: UnitConverter | None = None,
    weight_converter: UnitConverter | None = None,
) -> CalculationContext:
    math = math or DecimalMath()
    length_converter = length_converter or create_length_converter(math)
    weight_converter = weight_converter or create_weight_converter(math)

    return CalculationContext(
        configuration=configuration,
        math=math,
        length_converter=length_converter,
        weight_converter=weight_converter,
        dimensions_normalizer=DimensionsNormalizer(math),
        volumetric_weight_calculator=VolumetricWeightCalculator(
            math,
            weight_converter,
            length_converter,
            factor=configuration.volumetric_divisor_factor,
        ),
    )
