import argparse
import logging
import sys
from pathlib import Path

from src.app_shell.config import ConfigurationError, validate_ops_rules
from src.components.pricing import (
    INPUT_FIELDS,
    CalculateRentInput,
    default_inputs,
    run_calculate,
)
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    rules_path = Path(path)
    if not rules_path.exists():
        logger.error("Rules file %s not found.", rules_path)
        sys.exit(1)
    return load_rules(rules_path)


def handle_quote(rules: Rules, args: argparse.Namespace) -> int:
    inputs = default_inputs(rules.pricing, args.equipment_type)
    overrides = {
        name: getattr(args, name) for name in INPUT_FIELDS if getattr(args, name) is not None
    }
    inputs = inputs.model_copy(update=overrides)

    result = run_calculate(CalculateRentInput(inputs=inputs, clamp=args.clamp))
    if not result.success or result.breakdown is None:
        for error in result.errors:
            print(f"error: {error.field}: {error.message}", file=sys.stderr)
        return 2

    currency = rules.project.currency
    width = max(len(name) for name in result.breakdown.as_dict())
    for name, value in result.breakdown.as_dict().items():
        if name == "total_rent":
            continue
        print(f"{name.ljust(width)}  {value:,.2f}")
    print(f"{'total_rent'.ljust(width)}  {result.breakdown.total_rent:,} {currency}")
    return 0


def handle_check_rules(rules: Rules, args: argparse.Namespace) -> int:
    try:
        validate_ops_rules(rules)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"Rules {rules.project.slug} v{rules.project.rules_version} OK")
    print(f"Roles: {', '.join(sorted(rules.rbac.roles))}")
    print(f"Safety checks: {len(rules.feedback.safety_checks)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crane CRM CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # quote
    quote_parser = subparsers.add_parser("quote", help="Price a quotation")
    quote_parser.add_argument(
        "--equipment-type", help="Prefill the base rate from the rules' equipment rates"
    )
    quote_parser.add_argument(
        "--clamp", action="store_true", help="Treat negative values as 0 instead of failing"
    )
    for name in INPUT_FIELDS:
        quote_parser.add_argument(f"--{name.replace('_', '-')}", dest=name, type=float)

    # check-rules
    subparsers.add_parser("check-rules", help="Validate rules.yaml and the environment")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    rules = get_rules(args.rules)

    if args.command == "quote":
        return handle_quote(rules, args)
    elif args.command == "check-rules":
        return handle_check_rules(rules, args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
