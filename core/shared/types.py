"""
Shared types for trading signal modules.

This module consolidates the SignalType enum and the TradingSignal /
IndicatorValue dataclasses returned by every signal generator, so callers
can serialize and compare signals without knowing which indicator made them.
"""
import pandas as pd
from typing import Any, Dict, Tuple
from dataclasses import dataclass, field
from enum import Enum


class SignalType(Enum):
    """Type of trading signal."""
    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"
    # Reserved for future thresholding; no generator produces these yet
    STRONG_BUY = "StrongBuy"
    STRONG_SELL = "StrongSell"


@dataclass(frozen=True)
class IndicatorValue:
    """A single indicator reading attached to a signal."""
    name: str
    value: float
    signal: SignalType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": float(self.value),
            "signal": self.signal.value,
        }


@dataclass(frozen=True)
class TradingSignal:
    """
    Represents a trading signal produced by one indicator generator.

    price is always the last value of the series the signal was generated
    from; indicators is never empty for a successfully produced signal.
    """
    symbol: str
    signal_type: SignalType
    confidence: float
    price: float
    timestamp: pd.Timestamp
    indicators: Tuple[IndicatorValue, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (timestamp as Unix seconds)."""
        return {
            "symbol": self.symbol,
            "signal_type": self.signal_type.value,
            "confidence": float(self.confidence),
            "price": float(self.price),
            "timestamp": int(self.timestamp.timestamp()),
            "indicators": [ind.to_dict() for ind in self.indicators],
        }

    def indicator(self, name: str) -> IndicatorValue:
        """Look up an attached indicator by name."""
        for ind in self.indicators:
            if ind.name == name:
                return ind
        raise KeyError(f"Indicator '{name}' not attached to signal")
