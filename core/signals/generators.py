"""
Signal generator implementations following the SignalGenerator interface.

Each generator turns the latest EMA / RSI / MACD reading into a
TradingSignal. All smoothing goes through core.indicators.technical so the
EMA and MACD generators share one EMA implementation.
"""
import logging
from typing import Tuple

import numpy as np
import pandas as pd

from .base import SignalGenerator
from ..indicators.technical import (
    PriceSeries,
    as_price_array,
    calculate_ema,
    calculate_rsi,
    calculate_macd,
)
from ..shared.defaults import (
    EMA_SHORT_PERIOD, EMA_LONG_PERIOD,
    RSI_PERIOD, RSI_OVERBOUGHT, RSI_OVERSOLD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    MAX_CONFIDENCE, MAX_NEUTRAL_CONFIDENCE, MACD_CONFIDENCE_SCALE,
)
from ..shared.errors import InsufficientDataError, CalculationError
from ..shared.types import IndicatorValue, SignalType, TradingSignal

logger = logging.getLogger(__name__)


def _pct_of(diff: float, base: float) -> float:
    """|diff / base| * 100; a zero base saturates instead of raising."""
    if base == 0:
        return float("inf")
    return abs(diff / base) * 100.0


def _require_period(label: str, value: int) -> int:
    if value < 1:
        raise ValueError(f"{label} must be >= 1, got {value}")
    return int(value)


def _now() -> pd.Timestamp:
    return pd.Timestamp.now(tz="UTC")


class EMASignal(SignalGenerator):
    """Short/long EMA crossover (golden cross = buy, death cross = sell)."""

    name = "ema"

    def __init__(
        self,
        short_period: int = EMA_SHORT_PERIOD,
        long_period: int = EMA_LONG_PERIOD,
        symbol: str = "",
    ):
        super().__init__(symbol)
        self._short_period = _require_period("short_period", short_period)
        self._long_period = _require_period("long_period", long_period)

    @property
    def short_period(self) -> int:
        return self._short_period

    @property
    def long_period(self) -> int:
        return self._long_period

    @property
    def min_length(self) -> int:
        return self._long_period

    def calculate(self, prices: PriceSeries) -> np.ndarray:
        """Short-period EMA curve."""
        return calculate_ema(prices, self._short_period)

    def generate_signal(self, prices: PriceSeries) -> TradingSignal:
        values = as_price_array(prices)
        if len(values) < self.min_length:
            raise InsufficientDataError(self.name, self.min_length, len(values), symbol=self.symbol)

        ema_short = calculate_ema(values, self._short_period)
        ema_long = calculate_ema(values, self._long_period)
        if len(ema_short) == 0 or len(ema_long) == 0:
            raise CalculationError(self.name, "empty EMA curve", symbol=self.symbol)

        last_short = float(ema_short[-1])
        last_long = float(ema_long[-1])
        bullish = last_short > last_long

        # Equal EMAs fall through to the sell branch
        if bullish:
            signal_type = SignalType.BUY
            confidence = min(MAX_CONFIDENCE, _pct_of(last_short - last_long, last_long))
        else:
            signal_type = SignalType.SELL
            confidence = min(MAX_CONFIDENCE, _pct_of(last_long - last_short, last_short))

        logger.debug(
            f"{self.symbol} EMA({self._short_period})={last_short:.4f} "
            f"EMA({self._long_period})={last_long:.4f} -> {signal_type.value}"
        )

        indicators = (
            IndicatorValue("EMA Short", last_short, SignalType.BUY if bullish else SignalType.SELL),
            IndicatorValue("EMA Long", last_long, SignalType.HOLD),
        )
        return TradingSignal(
            symbol=self.symbol,
            signal_type=signal_type,
            confidence=confidence,
            price=float(values[-1]),
            timestamp=_now(),
            indicators=indicators,
        )

    def __repr__(self) -> str:
        return (
            f"EMASignal(short_period={self._short_period}, "
            f"long_period={self._long_period}, symbol={self.symbol!r})"
        )


class RSISignal(SignalGenerator):
    """Relative Strength Index oversold (buy) / overbought (sell) levels."""

    name = "rsi"

    def __init__(
        self,
        period: int = RSI_PERIOD,
        overbought: float = RSI_OVERBOUGHT,
        oversold: float = RSI_OVERSOLD,
        symbol: str = "",
    ):
        super().__init__(symbol)
        self._period = _require_period("period", period)
        if not (0 < oversold < overbought < 100):
            raise ValueError(
                f"RSI thresholds must satisfy 0 < oversold < overbought < 100, "
                f"got oversold={oversold}, overbought={overbought}"
            )
        self._overbought = float(overbought)
        self._oversold = float(oversold)

    @property
    def period(self) -> int:
        return self._period

    @property
    def overbought(self) -> float:
        return self._overbought

    @property
    def oversold(self) -> float:
        return self._oversold

    @property
    def min_length(self) -> int:
        return self._period + 1

    def calculate(self, prices: PriceSeries) -> np.ndarray:
        """RSI curve (Wilder smoothing)."""
        return calculate_rsi(prices, self._period)

    def classify(self, rsi_value: float) -> Tuple[SignalType, float]:
        """
        Map an RSI reading to (signal_type, confidence).

        Buy/sell confidence is in [0, 100]; the neutral zone is capped at 50.
        """
        if rsi_value <= self._oversold:
            confidence = min(MAX_CONFIDENCE, _pct_of(self._oversold - rsi_value, self._oversold))
            return SignalType.BUY, confidence
        if rsi_value >= self._overbought:
            confidence = min(
                MAX_CONFIDENCE,
                _pct_of(rsi_value - self._overbought, 100.0 - self._overbought),
            )
            return SignalType.SELL, confidence

        mid_point = (self._oversold + self._overbought) / 2.0
        distance_from_mid = abs(rsi_value - mid_point) / (self._overbought - self._oversold) * 2.0
        return SignalType.HOLD, min(MAX_NEUTRAL_CONFIDENCE, distance_from_mid * MAX_NEUTRAL_CONFIDENCE)

    def generate_signal(self, prices: PriceSeries) -> TradingSignal:
        values = as_price_array(prices)
        if len(values) < self.min_length:
            raise InsufficientDataError(self.name, self.min_length, len(values), symbol=self.symbol)

        rsi = calculate_rsi(values, self._period)
        if len(rsi) == 0:
            raise CalculationError(self.name, "empty RSI curve", symbol=self.symbol)

        rsi_value = float(rsi[-1])
        signal_type, confidence = self.classify(rsi_value)

        logger.debug(f"{self.symbol} RSI({self._period})={rsi_value:.2f} -> {signal_type.value}")

        indicators = (
            IndicatorValue("RSI", rsi_value, signal_type),
            IndicatorValue("RSI Oversold", self._oversold, SignalType.HOLD),
            IndicatorValue("RSI Overbought", self._overbought, SignalType.HOLD),
        )
        return TradingSignal(
            symbol=self.symbol,
            signal_type=signal_type,
            confidence=confidence,
            price=float(values[-1]),
            timestamp=_now(),
            indicators=indicators,
        )

    def __repr__(self) -> str:
        return (
            f"RSISignal(period={self._period}, overbought={self._overbought}, "
            f"oversold={self._oversold}, symbol={self.symbol!r})"
        )


class MACDSignal(SignalGenerator):
    """MACD line vs. signal line crossover, confirmed by histogram sign."""

    name = "macd"

    def __init__(
        self,
        fast_period: int = MACD_FAST,
        slow_period: int = MACD_SLOW,
        signal_period: int = MACD_SIGNAL,
        symbol: str = "",
    ):
        super().__init__(symbol)
        self._fast_period = _require_period("fast_period", fast_period)
        self._slow_period = _require_period("slow_period", slow_period)
        self._signal_period = _require_period("signal_period", signal_period)

    @property
    def fast_period(self) -> int:
        return self._fast_period

    @property
    def slow_period(self) -> int:
        return self._slow_period

    @property
    def signal_period(self) -> int:
        return self._signal_period

    @property
    def min_length(self) -> int:
        return self._slow_period + self._signal_period

    def calculate_components(self, prices: PriceSeries) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Calculate all MACD components: line, signal, histogram."""
        return calculate_macd(prices, self._fast_period, self._slow_period, self._signal_period)

    def calculate(self, prices: PriceSeries) -> np.ndarray:
        """MACD line (fast EMA - slow EMA)."""
        macd_line, _, _ = self.calculate_components(prices)
        return macd_line

    def generate_signal(self, prices: PriceSeries) -> TradingSignal:
        values = as_price_array(prices)
        if len(values) < self.min_length:
            raise InsufficientDataError(self.name, self.min_length, len(values), symbol=self.symbol)

        macd_line, signal_line, histogram = self.calculate_components(values)
        if len(macd_line) == 0 or len(signal_line) == 0:
            raise CalculationError(self.name, "empty MACD or signal line", symbol=self.symbol)

        last_macd = float(macd_line[-1])
        last_signal = float(signal_line[-1])
        last_histogram = float(histogram[-1])
        last_price = float(values[-1])

        if last_macd > last_signal and last_histogram > 0:
            signal_type = SignalType.BUY
            confidence = min(MAX_CONFIDENCE, _pct_of(last_histogram, last_price) * MACD_CONFIDENCE_SCALE)
        elif last_macd < last_signal and last_histogram < 0:
            signal_type = SignalType.SELL
            confidence = min(MAX_CONFIDENCE, _pct_of(last_histogram, last_price) * MACD_CONFIDENCE_SCALE)
        else:
            signal_type = SignalType.HOLD
            confidence = 0.0

        logger.debug(
            f"{self.symbol} MACD={last_macd:.4f} signal={last_signal:.4f} "
            f"hist={last_histogram:.4f} -> {signal_type.value}"
        )

        indicators = (
            IndicatorValue(
                "MACD Line", last_macd,
                SignalType.BUY if last_macd > last_signal else SignalType.SELL,
            ),
            IndicatorValue("Signal Line", last_signal, SignalType.HOLD),
            IndicatorValue(
                "Histogram", last_histogram,
                SignalType.BUY if last_histogram > 0 else SignalType.SELL,
            ),
        )
        return TradingSignal(
            symbol=self.symbol,
            signal_type=signal_type,
            confidence=confidence,
            price=last_price,
            timestamp=_now(),
            indicators=indicators,
        )

    def __repr__(self) -> str:
        return (
            f"MACDSignal(fast_period={self._fast_period}, slow_period={self._slow_period}, "
            f"signal_period={self._signal_period}, symbol={self.symbol!r})"
        )


__all__ = ['EMASignal', 'RSISignal', 'MACDSignal']
