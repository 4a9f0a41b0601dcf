#!/usr/bin/env python
"""Price one European option across a ladder of binomial step counts.

Each rung is logged as a `steps,value` line; the full table (value,
Black-Scholes limit, error) can also be written to CSV.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

from crr_pricing.apps._cli import (
    add_dry_run_arg,
    add_print_config_arg,
    collect_logging_overrides,
    log_dry_run,
    print_config,
)
from crr_pricing.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    config_section,
    resolve_path,
    setup_logging_from_config,
)
from crr_pricing.options import (
    CoefficientMethod,
    OptionType,
    PricingParameters,
    convergence_table,
    format_ladder_rows,
    steps_ladder,
    write_convergence_csv,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "dry_run": False,
    "pricing": {
        "asset_price": 100.0,
        "strike": 95.0,
        "time_step": 0.5,
        "volatility": 0.3,
        "risk_free_rate": 0.08,
        "option_type": "put",
        "coefficients": "factorial",
    },
    "ladder": {
        "start": 2,
        "stop": 170,
        "max_workers": 1,
    },
    "output": {
        "csv": None,
    },
}

_PRICING_ARGS: dict[str, str] = {
    "asset_price": "asset_price",
    "strike": "strike",
    "time_step": "time_step",
    "volatility": "volatility",
    "rate": "risk_free_rate",
    "option_type": "option_type",
    "coefficients": "coefficients",
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Price a European option over a range of CRR tree steps."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)
    add_dry_run_arg(parser)

    parser.add_argument("--asset-price", type=float, default=None)
    parser.add_argument("--strike", type=float, default=None)
    parser.add_argument(
        "--time-step",
        type=float,
        default=None,
        help="Time to expiry in years.",
    )
    parser.add_argument("--volatility", type=float, default=None)
    parser.add_argument("--rate", type=float, default=None)
    parser.add_argument(
        "--option-type",
        choices=[*(t.value for t in OptionType), "C", "P"],
        default=None,
    )
    parser.add_argument(
        "--coefficients",
        choices=[m.value for m in CoefficientMethod],
        default=None,
        help="Binomial weight method (factorial overflows past 170 steps).",
    )
    parser.add_argument("--steps-start", type=int, default=None)
    parser.add_argument("--steps-stop", type=int, default=None)
    parser.add_argument("--max-workers", type=int, default=None)
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional CSV path for the full convergence table.",
    )
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    pricing: dict[str, Any] = {}
    ladder: dict[str, Any] = {}

    for arg_name, key in _PRICING_ARGS.items():
        value = getattr(args, arg_name)
        if value is not None:
            pricing[key] = value
    if pricing:
        overrides["pricing"] = pricing

    if args.steps_start is not None:
        ladder["start"] = args.steps_start
    if args.steps_stop is not None:
        ladder["stop"] = args.steps_stop
    if args.max_workers is not None:
        ladder["max_workers"] = args.max_workers
    if ladder:
        overrides["ladder"] = ladder

    if args.output is not None:
        overrides["output"] = {"csv": args.output}

    if args.dry_run:
        overrides["dry_run"] = True

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_config(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    pricing = config_section(config, "pricing")
    ladder_cfg = config_section(config, "ladder")
    output_cfg = config_section(config, "output")

    steps = steps_ladder(int(ladder_cfg["start"]), int(ladder_cfg["stop"]))
    params = PricingParameters(**pricing, steps=steps.start)
    max_workers = int(ladder_cfg.get("max_workers") or 1)
    csv_path = resolve_path(output_cfg.get("csv"))
    dry_run = bool(config.get("dry_run", False))

    logger.info("Option:     %s K=%s", params.option_type, params.strike)
    logger.info(
        "Market:     S=%s sigma=%s r=%s T=%s",
        params.asset_price,
        params.volatility,
        params.risk_free_rate,
        params.time_step,
    )
    logger.info("Steps:      %d -> %d", steps.start, steps.stop - 1)
    logger.info("Weights:    %s", params.coefficients)
    logger.info("Workers:    %d", max_workers)

    if dry_run:
        log_dry_run(
            logger,
            {
                "action": "crr_convergence",
                "pricing": pricing,
                "steps": [steps.start, steps.stop - 1],
                "max_workers": max_workers,
                "output_csv": csv_path,
            },
        )
        return

    table = convergence_table(params, steps, max_workers=max_workers)
    for row in format_ladder_rows(table):
        logger.info("%s", row)

    if csv_path is not None:
        write_convergence_csv(table, csv_path)


if __name__ == "__main__":
    main()
