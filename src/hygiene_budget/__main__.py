"""Command line: print the energy budget report.

    python -m hygiene_budget                      # extended profile
    python -m hygiene_budget basic
    python -m hygiene_budget --config scenarios/extended.yaml
    python -m hygiene_budget --set radio.static_current_a=0.0001 --format json
"""

from __future__ import annotations

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from hygiene_budget.config.profile import SensorProfile
from hygiene_budget.config.profiles import builtin_profile, list_profiles, load_profile, set_path
from hygiene_budget.engine.orchestrator import run_budget
from hygiene_budget.engine.sensitivity import SensitivityResult, run_sensitivity
from hygiene_budget.errors import ConfigurationError
from hygiene_budget.report.headers import section_header
from hygiene_budget.report.renderer import write_report

logger = logging.getLogger(__name__)


def _parse_assignment(text: str) -> tuple[str, object]:
    """``path=value`` → (path, value); the value is parsed as YAML."""
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"expected path=value, got {text!r}")
    path, raw = text.split("=", 1)
    return path.strip(), yaml.safe_load(raw)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hygiene_budget",
        description="Estimate hygiene sensor battery life from its energy budget",
    )
    p.add_argument(
        "profile", nargs="?", default="extended", choices=list_profiles(),
        help="Built-in profile (default: extended)",
    )
    p.add_argument("--config", help="YAML profile file (overrides the built-in profile)")
    p.add_argument(
        "--set", dest="assignments", action="append", default=[], type=_parse_assignment,
        metavar="PATH=VALUE", help="Override one parameter, e.g. led.resistor_ohm=330",
    )
    p.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    p.add_argument("--sensitivity", action="store_true", help="Append a tornado table for life expectancy")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    return p


def _resolve_profile(args: argparse.Namespace) -> SensorProfile:
    profile = load_profile(args.config) if args.config else builtin_profile(args.profile)
    for path, value in args.assignments:
        profile = set_path(profile, path, value)
    return profile


def _write_sensitivity(result: SensitivityResult, stream) -> None:
    stream.write(f"\n{section_header('Sensitivity')}\n\n")
    stream.write(f"* Base life expectancy is {result.base_life_days:.0f} days.\n")
    for bar in result.bars:
        stream.write(
            f"* {bar.param_name}: {bar.life_days_at_low:.0f} to "
            f"{bar.life_days_at_high:.0f} days (swing {bar.delta_days:.0f})\n"
        )
    stream.write("\n")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        profile = _resolve_profile(args)
        budget = run_budget(profile)
        # Everything is computed before the first write
        tornado = run_sensitivity(profile) if args.sensitivity else None
        if args.format == "json":
            sys.stdout.write(budget.model_dump_json(indent=2) + "\n")
        else:
            write_report(budget, sys.stdout)
        if tornado is not None:
            _write_sensitivity(tornado, sys.stdout)
    except (ValidationError, ConfigurationError) as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2
    except (OSError, yaml.YAMLError) as e:
        print(f"cannot read profile: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
