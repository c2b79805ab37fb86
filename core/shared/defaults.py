"""
Centralized default values for indicator parameters.

This is the SINGLE SOURCE OF TRUTH for all indicator parameter defaults.
All modules should import from here to ensure consistency.
"""

# EMA (Exponential Moving Average) defaults
EMA_SHORT_PERIOD = 12
EMA_LONG_PERIOD = 26

# RSI (Relative Strength Index) defaults
RSI_PERIOD = 14
RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0

# MACD (Moving Average Convergence Divergence) defaults
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9

# Confidence bounds
MAX_CONFIDENCE = 100.0
MAX_NEUTRAL_CONFIDENCE = 50.0  # RSI neutral zone (HOLD) is capped lower

# MACD histogram is a small fraction of price; scale it into the confidence range
MACD_CONFIDENCE_SCALE = 10.0

# Symbols evaluated when neither config nor environment names any
DEFAULT_TRADING_PAIRS = ("BTCUSDT", "ETHUSDT", "SOLUSDT")
