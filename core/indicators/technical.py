"""
Technical indicator calculations (EMA, RSI, MACD).

Pure functions over a chronological price series. Every curve is returned
as a numpy array aligned so its LAST element corresponds to the LAST input
price; warm-up points are dropped rather than padded with NaN, so curves
of different periods have different lengths and must be trailing-aligned
before they are combined.
"""
from typing import Sequence, Tuple, Union

import numpy as np
import pandas as pd

PriceSeries = Union[Sequence[float], np.ndarray, pd.Series]


def as_price_array(prices: PriceSeries) -> np.ndarray:
    """Convert any supported price container into a 1-D float array (index ignored)."""
    if isinstance(prices, pd.Series):
        return prices.to_numpy(dtype=float)
    return np.asarray(prices, dtype=float).reshape(-1)


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")


def calculate_ema(prices: PriceSeries, period: int) -> np.ndarray:
    """
    Calculate Exponential Moving Average.

    The first value is the simple mean of prices[:period]; each later value
    follows ema = (price - prev) * m + prev with m = 2 / (period + 1).

    Args:
        prices: Chronological price series
        period: Smoothing window length

    Returns:
        Array of length len(prices) - period + 1, or empty if len(prices) < period
    """
    _check_period(period)
    values = as_price_array(prices)
    n = len(values)
    if n < period:
        return np.empty(0, dtype=float)

    multiplier = 2.0 / (period + 1.0)
    ema = np.empty(n - period + 1, dtype=float)
    ema[0] = values[:period].sum() / period
    for out_idx, price in enumerate(values[period:], start=1):
        prev = ema[out_idx - 1]
        ema[out_idx] = (price - prev) * multiplier + prev
    return ema


def align_trailing(a: PriceSeries, b: PriceSeries) -> Tuple[np.ndarray, np.ndarray]:
    """
    Trim two series to their shared length, keeping the most recent values.

    Both inputs are assumed to end at the same time step.

    Returns:
        Tuple of (a_tail, b_tail), both of length min(len(a), len(b))
    """
    a = as_price_array(a)
    b = as_price_array(b)
    length = min(len(a), len(b))
    return a[len(a) - length:], b[len(b) - length:]


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0.0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def calculate_rsi(prices: PriceSeries, period: int) -> np.ndarray:
    """
    Calculate Relative Strength Index with Wilder smoothing.

    RSI = 100 - (100 / (1 + RS))
    RS = Average Gain / Average Loss  (RSI = 100 when Average Loss is 0)

    Averages are seeded with the simple mean of the first `period` gains and
    losses, then smoothed as avg = (avg * (period - 1) + current) / period.

    Returns:
        Array of length len(prices) - period, or empty if len(prices) <= period
    """
    _check_period(period)
    values = as_price_array(prices)
    if len(values) <= period:
        return np.empty(0, dtype=float)

    delta = np.diff(values)
    gains = np.where(delta >= 0, delta, 0.0)
    losses = np.where(delta < 0, -delta, 0.0)

    avg_gain = gains[:period].sum() / period
    avg_loss = losses[:period].sum() / period

    rsi = np.empty(len(delta) - period + 1, dtype=float)
    rsi[0] = _rsi_from_averages(avg_gain, avg_loss)
    for out_idx, i in enumerate(range(period, len(delta)), start=1):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        rsi[out_idx] = _rsi_from_averages(avg_gain, avg_loss)
    return rsi


def calculate_macd(
    prices: PriceSeries,
    fast_period: int,
    slow_period: int,
    signal_period: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Calculate MACD (Moving Average Convergence Divergence).

    MACD line = EMA(fast) - EMA(slow), trailing-aligned
    Signal line = EMA(MACD line, signal_period)
    Histogram = MACD line - Signal line, trailing-aligned

    Returns:
        Tuple of (MACD line, Signal line, Histogram); any may be empty when
        the series is too short
    """
    _check_period(signal_period)
    values = as_price_array(prices)
    if len(values) < slow_period:
        empty = np.empty(0, dtype=float)
        return empty, empty.copy(), empty.copy()

    ema_fast, ema_slow = align_trailing(
        calculate_ema(values, fast_period),
        calculate_ema(values, slow_period),
    )
    macd_line = ema_fast - ema_slow

    if len(macd_line) >= signal_period:
        signal_line = calculate_ema(macd_line, signal_period)
    else:
        signal_line = np.empty(0, dtype=float)

    macd_tail, signal_tail = align_trailing(macd_line, signal_line)
    histogram = macd_tail - signal_tail

    return macd_line, signal_line, histogram
