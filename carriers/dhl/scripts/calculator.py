"""
DHL Express Shipping Cost Calculator
====================================

Interactive CLI tool to calculate the expected shipping cost for a single
shipment.

Usage:
    python -m carriers.dhl.scripts.calculator
"""

from datetime import date

from carriers.dhl.calculate_costs import calculate_package, get_engine
from carriers.dhl.version import VERSION
from shared.engine import normalize_country_code
from shared.logging_utils import configure_logging
from shared.models import Address, Dimensions, Package, Quantity, Result
from shared.validation import ValidationMode


def get_user_input() -> Package:
    """Prompt user for shipment details."""
    configuration = get_engine().configuration

    print("\n=== DHL Express Worldwide Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    length = input("Length (cm): ").strip()
    width = input("Width (cm): ").strip()
    height = input("Height (cm): ").strip()
    weight = input(f"Weight (kg, max {configuration.maximum_weight}): ").strip()

    sender = input("Origin country code [default: US]: ").strip() or "US"
    recipient = input("Destination country code (e.g., DE): ").strip()

    date_input = input(f"\nShip date (YYYY-MM-DD) [default: {date.today()}]: ").strip()
    ship_date = date.fromisoformat(date_input) if date_input else date.today()

    return Package(
        weight=Quantity.weight(weight, "kg"),
        dimensions=Dimensions.of(length, width, height, "cm"),
        sender_address=Address(normalize_country_code(sender)),
        recipient_address=Address(normalize_country_code(recipient)),
        calculation_date=ship_date,
    )


def print_results(result: Result) -> None:
    """Print calculation results."""
    package = result.package

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    dims = package.dimensions
    print(f"\nShipment: {dims.length}x{dims.width}x{dims.height} {dims.unit.value}, "
          f"{package.weight.value} {package.weight.unit.value}")
    print(f"Route: {package.sender_address.country_code} -> {package.recipient_address.country_code}")
    print(f"Ship date: {package.calculation_date}")

    if result.violations:
        print("\nRejected:")
        for violation in result.violations:
            print(f"  - {violation.message}")
        print()
        return

    print(f"\nBillable weight: {result.billable_weight.value} {result.billable_weight.unit.value}")
    print(f"\nTOTAL:              {result.currency} {result.total_cost:>9}")
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
