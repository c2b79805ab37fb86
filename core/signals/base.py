"""
Base signal generator interface.

All generators follow this pattern:
1. Calculate the raw indicator curve from price data
2. Interpret the latest reading as a TradingSignal with a confidence score
"""
from abc import ABC, abstractmethod

import numpy as np

from ..indicators.technical import PriceSeries
from ..shared.types import TradingSignal


class SignalGenerator(ABC):
    """
    Base class for all signal generators.

    Generators hold only immutable configuration, so one instance can be
    reused (or shared between threads) for any number of evaluations.
    """

    #: Short indicator label ("ema", "rsi", "macd")
    name: str = ""

    def __init__(self, symbol: str = ""):
        self._symbol = symbol

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    @abstractmethod
    def min_length(self) -> int:
        """Minimum number of prices generate_signal accepts."""

    @abstractmethod
    def generate_signal(self, prices: PriceSeries) -> TradingSignal:
        """
        Generate a trading signal from the latest indicator reading.

        Args:
            prices: Chronological price series; the last value is "now"

        Returns:
            TradingSignal for this generator's symbol

        Raises:
            InsufficientDataError: If len(prices) < min_length
            CalculationError: If an intermediate curve came out empty
        """
        pass

    @abstractmethod
    def calculate(self, prices: PriceSeries) -> np.ndarray:
        """
        Calculate the primary indicator curve (no signal decision).

        Returns:
            Trailing-aligned indicator values; empty when the series is too short
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(symbol={self._symbol!r})"
