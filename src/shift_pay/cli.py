"""Shift pay command line interface.

Usage:
    python -m shift_pay.cli calculate --file shifts.json [--tax 35] [--json]
    python -m shift_pay.cli rates

The shifts file holds a JSON list of objects with "id", "date" (YYYY-MM-DD),
"start_time" and "end_time" ("HH:MM").
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any, Callable

from shift_pay.calculators.engine import PayEngine
from shift_pay.calculators.types import PayCalculation, WorkShift
from shift_pay.calculators.validation import ShiftValidationError
from shift_pay.config import configure_logging, get_settings


def load_shifts(path: Path) -> list[WorkShift]:
    """Read shifts from a JSON file."""
    raw: list[dict[str, Any]] = json.loads(path.read_text(encoding="utf-8"))
    return [
        WorkShift(
            id=str(item["id"]),
            date=date.fromisoformat(item["date"]),
            start_time=item["start_time"],
            end_time=item["end_time"],
        )
        for item in raw
    ]


def format_nok(amount: float) -> str:
    """Format an amount as NOK with two decimals."""
    return f"{amount:,.2f} kr".replace(",", " ")


def render_summary(result: PayCalculation, tax_percentage: float) -> str:
    """Plain-text pay summary."""
    lines = []
    for detail in result.details:
        lines.append(f"{detail.date}  ({detail.hours:.2f} h)")
        lines.append(f"  Base wage:  {format_nok(detail.base_wage)}")
        for entry in detail.breakdown:
            lines.append(f"    {entry}")
        lines.append(f"  Allowances: {format_nok(detail.allowances)}")
        lines.append(f"  Total:      {format_nok(detail.total)}")
    lines.append("=" * 40)
    lines.append(f"Hours worked:     {result.hours_worked:.2f}")
    lines.append(f"Base wage:        {format_nok(result.base_wage)}")
    lines.append(f"Allowances:       {format_nok(result.allowances)}")
    lines.append(f"Total before tax: {format_nok(result.total_before_tax)}")
    lines.append(f"Tax ({tax_percentage:g}%):        - {format_nok(result.tax)}")
    lines.append(f"Net pay:          {format_nok(result.net_pay)}")
    return "\n".join(lines)


class ShiftPayCli:
    """Shift pay command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m shift_pay.cli",
            description="Calculate pay for hourly shifts",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate pay for shifts in a JSON file",
        )
        calculate.add_argument(
            "--file",
            type=Path,
            required=True,
            help="JSON file with a list of shifts",
        )
        calculate.add_argument(
            "--tax",
            type=float,
            help="Tax percentage (default: $DEFAULT_TAX_PERCENTAGE)",
        )
        calculate.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )
        calculate.add_argument(
            "--strict",
            action="store_true",
            help="Reject malformed shifts instead of producing NaN",
        )

        subparsers.add_parser("rates", help="Show wage and allowance rates")

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "rates": self._cmd_rates,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate and print pay."""
        settings = get_settings()
        tax_percentage = (
            args.tax if args.tax is not None else settings.default_tax_percentage
        )

        try:
            shifts = load_shifts(args.file)
        except (OSError, ValueError, KeyError) as e:
            print(f"ERROR: could not read shifts from {args.file}: {e}", file=sys.stderr)
            return 1

        engine = PayEngine(
            strict=args.strict or settings.strict_validation,
            engine_version=settings.engine_version,
        )
        try:
            result = engine.calculate(shifts, tax_percentage)
        except ShiftValidationError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        if args.json:
            print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        else:
            print(render_summary(result, tax_percentage))
        return 0

    def _cmd_rates(self, args: argparse.Namespace) -> int:
        """Print the rate table."""
        engine = PayEngine()
        print(f"Base hourly wage: {engine.base_hourly_wage} NOK")
        for name, rate in engine.rates.as_dict().items():
            print(f"  {name}: {rate:g} NOK/h")
        return 0


def main() -> int:
    """CLI entry point."""
    configure_logging()
    cli = ShiftPayCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
