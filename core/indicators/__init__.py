"""
Indicator calculation module.

Provides the technical indicators used by the signal generators:
- EMA (single shared smoothing implementation)
- RSI (Wilder smoothing)
- MACD (line, signal line, histogram)
- Trailing alignment of curves with different warm-up lengths
"""
from .technical import (
    as_price_array,
    calculate_ema,
    calculate_rsi,
    calculate_macd,
    align_trailing,
)

__all__ = [
    'as_price_array',
    'calculate_ema',
    'calculate_rsi',
    'calculate_macd',
    'align_trailing',
]
