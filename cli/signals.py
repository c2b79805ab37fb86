#!/usr/bin/env python3
"""
Signal evaluation CLI.

Loads closing prices from CSV files and prints the EMA, RSI and MACD
signals for each symbol, as a table or as JSON.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from core.data.loader import load_price_series
from core.signals.config import SignalConfig, BASELINE_CONFIG
from core.signals.config_loader import load_config_from_yaml, apply_env_overrides
from core.signals.engine import SignalEngine, SymbolEvaluation, signals_frame
from core.shared.utils import round_decimal


def setup_logging(log_path: Optional[Path] = None, verbose: bool = False):
    """
    Setup logging to stderr and optionally to file.

    Args:
        log_path: Path to log file (None = stderr only)
        verbose: If True, use DEBUG level, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # stdout carries the report (and JSON), so log to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def collect_price_map(
    csv_paths: List[str],
    data_dir: Optional[str],
    config: SignalConfig,
    column: str,
) -> Dict[str, pd.Series]:
    """
    Resolve symbol -> prices from explicit CSV files or a data directory.

    Explicit files are keyed by their upper-cased stem. With a data directory,
    each configured trading pair is read from <data_dir>/<SYMBOL>.csv; missing
    files are reported and skipped.
    """
    logger = logging.getLogger(__name__)
    price_map: Dict[str, pd.Series] = {}

    for path in csv_paths:
        price_map[Path(path).stem.upper()] = load_price_series(path, column=column)

    if data_dir:
        for symbol in config.trading_pairs:
            path = Path(data_dir) / f"{symbol}.csv"
            if not path.exists():
                logger.warning(f"No data file for {symbol}: {path}")
                continue
            price_map[symbol] = load_price_series(path, column=column)

    return price_map


def format_table(evaluations: Dict[str, SymbolEvaluation]) -> str:
    """Format evaluations as a plain-text table plus error lines."""
    lines = []
    df = signals_frame(evaluations)
    if df.empty:
        lines.append("No signals produced")
    else:
        df = df.drop(columns=["timestamp"])
        df["confidence"] = df["confidence"].map(lambda c: round_decimal(c, 2))
        df["price"] = df["price"].map(lambda p: round_decimal(p, 4))
        lines.append(df.to_string(index=False))

    for symbol, evaluation in evaluations.items():
        for indicator, error in evaluation.errors.items():
            lines.append(f"  {symbol} {indicator.upper()}: {error}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for signal evaluation."""
    parser = argparse.ArgumentParser(
        description="Generate EMA/RSI/MACD trading signals from CSV price history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Signals for one file (symbol = file name)
    python -m cli.signals data/BTCUSDT.csv

    # All configured trading pairs from a directory, as JSON
    python -m cli.signals --data-dir data --config configs/signals.yaml --json
        """
    )
    parser.add_argument("csv", nargs="*", help="CSV files with a price column")
    parser.add_argument("--data-dir", type=str, help="Directory with <SYMBOL>.csv per trading pair")
    parser.add_argument("--config", type=str, help="YAML config file (default: built-in defaults)")
    parser.add_argument("--column", type=str, default="Close", help="Price column (default: Close)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers (1 = sequential)")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging (DEBUG level)")

    args = parser.parse_args(argv)

    setup_logging(Path(args.log_file) if args.log_file else None, args.verbose)

    if not args.csv and not args.data_dir:
        parser.error("give at least one CSV file or --data-dir")

    try:
        config = load_config_from_yaml(args.config) if args.config else BASELINE_CONFIG
        config = apply_env_overrides(config)
        price_map = collect_price_map(args.csv, args.data_dir, config, args.column)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not price_map:
        print("Error: no price data found", file=sys.stderr)
        return 1

    engine = SignalEngine(config)
    evaluations = engine.evaluate_many(price_map, max_workers=args.workers)

    if args.json:
        print(json.dumps([e.to_dict() for e in evaluations.values()], indent=2))
    else:
        print(format_table(evaluations))

    return 0 if any(e.ok for e in evaluations.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
