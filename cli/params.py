#!/usr/bin/env python3
"""
Parameter reference CLI.

Shows all configurable parameters, their constraints, and defaults.
"""
from core.shared.defaults import (
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    EMA_SHORT_PERIOD, EMA_LONG_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    DEFAULT_TRADING_PAIRS,
)
from core.signals.config_loader import TRADING_PAIRS_ENV


def main():
    """Print all configurable parameters with their constraints and defaults."""

    print("=" * 80)
    print("SIGNAL ENGINE PARAMETER REFERENCE")
    print("=" * 80)
    print()

    print("EMA (Exponential Moving Average) - indicators.ema:")
    print(f"  short_period        Short period: {EMA_SHORT_PERIOD} (default)")
    print(f"  long_period         Long period: {EMA_LONG_PERIOD} (default)")
    print("                      Note: long_period must be > short_period")
    print("                      Needs at least long_period prices")
    print()

    print("RSI (Relative Strength Index) - indicators.rsi:")
    print(f"  period              Period: {RSI_PERIOD} (default)")
    print(f"  oversold            Oversold threshold: {RSI_OVERSOLD} (default)")
    print(f"  overbought          Overbought threshold: {RSI_OVERBOUGHT} (default)")
    print("                      Note: 0 < oversold < overbought < 100")
    print("                      Needs at least period + 1 prices")
    print()

    print("MACD (Moving Average Convergence Divergence) - indicators.macd:")
    print(f"  fast                Fast period: {MACD_FAST} (default)")
    print(f"  slow                Slow period: {MACD_SLOW} (default)")
    print(f"  signal              Signal period: {MACD_SIGNAL} (default)")
    print("                      Note: slow must be > fast")
    print("                      Needs at least slow + signal prices")
    print()

    print("DATA - data:")
    print(f"  trading_pairs       Symbols: {', '.join(DEFAULT_TRADING_PAIRS)} (default)")
    print(f"                      Overridden by ${TRADING_PAIRS_ENV} (comma separated)")
    print()

    print("Each indicator section also accepts 'enabled: false' to skip it.")
    return 0


if __name__ == "__main__":
    main()
