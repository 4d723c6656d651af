#!/usr/bin/env python3
# src/scenario_forecast/runner.py: command line entry point

import argparse
import json
import logging
import sys
import time

from .engine.parameters import DEFAULT_DAYS, DEFAULT_SCENARIO, SimulationParameters
from .engine.scenarios import SCENARIOS, get_simulation_context
from .engine.simulate import run_simulation
from .diagnostics.validation import validation_checks
from .regional.batch import RegionalBatchConfig, run_regional_batch


def add_model_args(p):
    """Scenario inputs shared by the simulate and validate commands."""
    p.add_argument("--scenario", default=DEFAULT_SCENARIO, metavar="NAME",
                   help=f"Scenario name, one of {', '.join(SCENARIOS)} (default: {DEFAULT_SCENARIO})")
    p.add_argument("--r0", type=float, default=2.5, metavar="R0",
                   help="Transmissibility factor, nominally 0-5 (default: 2.5)")
    p.add_argument("--healthcare", type=float, default=60.0, metavar="PCT",
                   help="Healthcare capacity percent (default: 60)")
    p.add_argument("--lockdown", type=float, default=80.0, metavar="PCT",
                   help="Containment stringency percent (default: 80)")
    p.add_argument("--population", type=int, default=10_000_000, metavar="N",
                   help="Population size, at least 1000 (default: 10000000)")
    p.add_argument("--days", type=int, default=DEFAULT_DAYS, metavar="DAYS",
                   help=f"Simulation horizon in days (default: {DEFAULT_DAYS})")
    p.add_argument("--region", default=None, metavar="NAME",
                   help="Optional region label, display only")


def params_from_args(args) -> SimulationParameters:
    return SimulationParameters(
        scenario=args.scenario,
        R0=args.r0,
        healthcare=args.healthcare,
        lockdown=args.lockdown,
        population=args.population,
        days=args.days,
        region=args.region,
    )


def build_parser():
    p = argparse.ArgumentParser(description="Scenario forecast runner")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # ---------- simulate ----------
    sim_p = sub.add_parser("simulate", help="Run one simulation")
    add_model_args(sim_p)
    sim_p.add_argument("--json", action="store_true", help="Print the full result record as JSON")
    sim_p.add_argument("--csv", default=None, metavar="PATH", help="Write the time series to CSV")
    sim_p.add_argument("--plot", default=None, metavar="PATH", help="Write a time series PNG")

    # ---------- context ----------
    ctx_p = sub.add_parser("context", help="Print the label sets of a scenario")
    ctx_p.add_argument("--scenario", default=DEFAULT_SCENARIO, metavar="NAME")

    # ---------- regions ----------
    reg_p = sub.add_parser("regions", help="Simulate every region of a state_data JSON or region CSV")
    reg_p.add_argument("--input", default="data/state_data.json", metavar="PATH",
                       help="Region file (default: data/state_data.json)")
    reg_p.add_argument("--out", default="data/regional_summary.csv", metavar="PATH",
                       help="Summary CSV path (default: data/regional_summary.csv)")
    reg_p.add_argument("--scenario", default=DEFAULT_SCENARIO, metavar="NAME")
    reg_p.add_argument("--r0", type=float, default=2.5)
    reg_p.add_argument("--healthcare", type=float, default=60.0)
    reg_p.add_argument("--lockdown", type=float, default=80.0)
    reg_p.add_argument("--days", type=int, default=DEFAULT_DAYS)

    # ---------- validate ----------
    val_p = sub.add_parser("validate", help="Run one simulation and report the sanity checks")
    add_model_args(val_p)

    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    t0 = time.perf_counter()
    status = 0

    if args.cmd == "simulate":
        result = run_simulation(params_from_args(args))
        if args.json:
            print(result.to_json(indent=2))
        else:
            print(f"Peak day: {result.peak_day}")
            print(f"Peak infections: {result.peak_infections:,} "
                  f"({result.confidence_interval.lower:,} - {result.confidence_interval.upper:,})")
            print(f"Total deaths: {result.total_deaths:,}")
            print(f"Final Rt: {result.final_r}")
            print(f"Duration: {result.duration} days, accuracy {result.accuracy}%")
            for line in result.insights:
                print(f"  - {line}")
        if args.csv:
            result.to_frame().to_csv(args.csv)
            print("Time series ->", args.csv)
        if args.plot:
            from .plotting.series import plot_time_series
            plot_time_series(result, save_path=args.plot)
            print("Plot ->", args.plot)

    elif args.cmd == "context":
        print(json.dumps(get_simulation_context(args.scenario).to_dict(), indent=2))

    elif args.cmd == "regions":
        cfg = RegionalBatchConfig(
            input_path=args.input,
            out_path=args.out,
            scenario=args.scenario,
            R0=args.r0,
            healthcare=args.healthcare,
            lockdown=args.lockdown,
            days=args.days,
        )
        summary, csv_path = run_regional_batch(cfg)
        print(f"{len(summary)} regions ->", csv_path)

    elif args.cmd == "validate":
        result = run_simulation(params_from_args(args))
        checks = validation_checks(result)
        for name, ok in checks.items():
            print(f"{name}: {'ok' if ok else 'FAILED'}")
        status = 0 if all(checks.values()) else 1

    print(f"Done in {time.perf_counter() - t0:.2f}s", file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(main())
