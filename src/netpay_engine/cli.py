"""Net pay estimator command line interface.

Usage:
    python -m netpay_engine.cli estimate --gross 30000 --installments 14
    python -m netpay_engine.cli estimate --gross 45000 --dependents 2 --marital-status MARRIED --json
    python -m netpay_engine.cli brackets
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import Any, Callable

from netpay_engine.calculators.engine import PayrollAggregator
from netpay_engine.calculators.line_builder import BreakdownBuilder
from netpay_engine.calculators.types import (
    InvalidMaritalStatusError,
    MaritalStatus,
    PersonalSituation,
    SalaryInput,
)
from netpay_engine.config import ALLOWED_INSTALLMENTS, get_settings


def parse_marital_status(s: str) -> MaritalStatus:
    """Parse marital status for argparse."""
    try:
        return MaritalStatus.parse(s)
    except InvalidMaritalStatusError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_dependents(s: str) -> int:
    """Parse a non-negative dependent count."""
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError("dependents must be >= 0")
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class NetPayCli:
    """Net pay estimator command line interface."""

    def __init__(self) -> None:
        self.settings = get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="netpay",
            description="Estimate net pay from gross annual salary",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=self.settings.log_level,
            help=f"Logging level (default: {self.settings.log_level})",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # estimate command
        estimate = subparsers.add_parser(
            "estimate",
            help="Estimate net pay for one salary",
        )
        estimate.add_argument(
            "--gross",
            type=str,
            default=str(self.settings.default_gross_annual),
            help=f"Gross annual salary (default: {self.settings.default_gross_annual})",
        )
        estimate.add_argument(
            "--installments",
            type=int,
            choices=ALLOWED_INSTALLMENTS,
            default=self.settings.default_installments,
            help=f"Installments per year (default: {self.settings.default_installments})",
        )
        estimate.add_argument(
            "--dependents",
            type=parse_dependents,
            default=self.settings.default_dependents,
            help=f"Number of dependents (default: {self.settings.default_dependents})",
        )
        estimate.add_argument(
            "--marital-status",
            type=parse_marital_status,
            default=self.settings.default_marital_status,
            help=f"SINGLE or MARRIED (default: {self.settings.default_marital_status.value})",
        )
        estimate.add_argument(
            "--json",
            action="store_true",
            help="Output raw figures as JSON",
        )

        # brackets command
        subparsers.add_parser(
            "brackets",
            help="Show the tax bracket table",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        logging.basicConfig(level=parsed.log_level.upper())

        if not parsed.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "estimate": self._cmd_estimate,
            "brackets": self._cmd_brackets,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_estimate(self, args: argparse.Namespace) -> int:
        """Estimate net pay."""
        aggregator = PayrollAggregator()
        result = aggregator.aggregate(
            SalaryInput(gross_annual=args.gross, installments_per_year=args.installments),
            PersonalSituation(
                dependent_count=args.dependents,
                marital_status=args.marital_status,
            ),
        )
        breakdown = BreakdownBuilder.build(result, aggregator.contribution_calculator.rate)

        if args.json:
            payload = {
                "result": result.to_dict(),
                "breakdown": [
                    {
                        "line_type": line.line_type.value,
                        "label": line.label,
                        "amount": line.amount,
                        "rate": line.rate,
                    }
                    for line in breakdown
                ],
            }
            print(json.dumps(payload, default=_json_default, indent=2))
            return 0

        print(f"Net per installment: {result.net_monthly}")
        print(f"Net annual:          {result.net_annual}")
        print()
        for line in breakdown:
            print(f"  {line.label:<45} {line.amount}")
        return 0

    def _cmd_brackets(self, args: argparse.Namespace) -> int:
        """Print the bracket table."""
        engine = PayrollAggregator().tax_engine
        previous = Decimal("0")
        for bracket in engine.brackets:
            upper = "and above" if not bracket.upper_limit.is_finite() else str(bracket.upper_limit)
            print(f"  {previous:>8} - {upper:<10} {bracket.rate}")
            previous = bracket.upper_limit
        return 0


def main() -> int:
    """CLI entry point."""
    cli = NetPayCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
