"""
Asendia e-PAQ Shipping Cost Calculator
======================================

Interactive CLI tool to calculate the expected shipping cost for a single
shipment, with the price group / fuel breakdown.

Usage:
    python -m carriers.asendia.scripts.calculator
"""

from carriers.asendia.calculate_costs import calculate_package, get_engine
from carriers.asendia.data import EXPORT_COUNTRIES
from carriers.asendia.version import VERSION
from shared.engine import normalize_country_code
from shared.logging_utils import configure_logging
from shared.models import Address, Dimensions, Package, Quantity, Result
from shared.validation import ValidationMode


def get_user_input() -> Package:
    """Prompt user for shipment details."""
    configuration = get_engine().configuration

    print("\n=== Asendia e-PAQ Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    length = input("Length (inches): ").strip()
    width = input("Width (inches): ").strip()
    height = input("Height (inches): ").strip()
    weight = input(f"Weight (lbs, max {configuration.maximum_weight}): ").strip()
    recipient = input("Destination country code (e.g., GB): ").strip()

    # Origin is fixed for the e-PAQ contract
    origin = EXPORT_COUNTRIES[0]
    print(f"\nOrigin: {origin} (fixed)")

    return Package(
        weight=Quantity.weight(weight, "lb"),
        dimensions=Dimensions.of(length, width, height, "in"),
        sender_address=Address(origin),
        recipient_address=Address(normalize_country_code(recipient)),
    )


def print_results(result: Result) -> None:
    """Print calculation results with the price group / fuel split."""
    engine = get_engine()
    package = result.package

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    if result.violations:
        print("\nRejected:")
        for violation in result.violations:
            print(f"  - {violation.message}")
        print()
        return

    math = engine.math
    weight = result.billable_weight.value
    price_group = engine.rate_table(package)
    base = price_group.price(weight, math)
    fuel = math.mul(math.round_down(weight, 0), engine.configuration.fuel_subcharge_rate)

    print(f"\nPrice group: {price_group.name}")
    print(f"Weight: {weight} {result.billable_weight.unit.value} "
          f"(fuel billed on {math.round_down(weight, 0)})")

    print("\n--- Cost Breakdown ---")
    print(f"Base rate:          ${math.format(base):>8}")
    print(f"Fuel surcharge:     ${math.format(fuel):>8}")
    print(f"                    {'=' * 9}")
    print(f"TOTAL:              ${result.total_cost:>8}")
    print()


def main():
    """Main entry point."""
    configure_logging()
    try:
        package = get_user_input()
        result = calculate_package(package, ValidationMode.COLLECT_ALL)
        print_results(result)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
