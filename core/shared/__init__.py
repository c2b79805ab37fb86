"""
Shared types and defaults for the signal engine.

This module provides:
- SignalType enum, IndicatorValue and TradingSignal dataclasses
- The SignalError taxonomy raised by generators
- Centralized default values for all indicator parameters
"""
from .types import SignalType, IndicatorValue, TradingSignal
from .errors import SignalError, InsufficientDataError, CalculationError
from .defaults import (
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    EMA_SHORT_PERIOD, EMA_LONG_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    DEFAULT_TRADING_PAIRS,
)

__all__ = [
    'SignalType',
    'IndicatorValue',
    'TradingSignal',
    'SignalError',
    'InsufficientDataError',
    'CalculationError',
    'RSI_PERIOD', 'RSI_OVERSOLD', 'RSI_OVERBOUGHT',
    'EMA_SHORT_PERIOD', 'EMA_LONG_PERIOD',
    'MACD_FAST', 'MACD_SLOW', 'MACD_SIGNAL',
    'DEFAULT_TRADING_PAIRS',
]
