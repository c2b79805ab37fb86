"""
Signal engine configuration.

Holds which indicators are enabled, their periods/thresholds and the
symbols to evaluate. Config validation runs at construction time (fail fast
with clear errors); instances are frozen and never mutated afterwards.
"""
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from .base import SignalGenerator
from .generators import EMASignal, RSISignal, MACDSignal
from ..shared.defaults import (
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    EMA_SHORT_PERIOD, EMA_LONG_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    DEFAULT_TRADING_PAIRS,
)


def _validate_config(
    *,
    ema_short_period: int,
    ema_long_period: int,
    rsi_period: int,
    rsi_oversold: float,
    rsi_overbought: float,
    macd_fast: int,
    macd_slow: int,
    macd_signal: int,
    trading_pairs: Tuple[str, ...],
) -> None:
    """Validate indicator parameters. Raises ValueError with clear message on failure."""
    for label, value in (
        ("ema_short_period", ema_short_period),
        ("ema_long_period", ema_long_period),
        ("rsi_period", rsi_period),
        ("macd_fast", macd_fast),
        ("macd_slow", macd_slow),
        ("macd_signal", macd_signal),
    ):
        if value < 1:
            raise ValueError(f"{label} must be >= 1, got {value}")
    if ema_short_period >= ema_long_period:
        raise ValueError(
            f"EMA short_period ({ema_short_period}) must be less than long_period ({ema_long_period})"
        )
    if macd_fast >= macd_slow:
        raise ValueError(
            f"MACD fast ({macd_fast}) must be less than slow ({macd_slow})"
        )
    if not (0 < rsi_oversold < rsi_overbought < 100):
        raise ValueError(
            f"RSI oversold ({rsi_oversold}) must be less than overbought ({rsi_overbought}), "
            f"both strictly between 0 and 100"
        )
    if not trading_pairs:
        raise ValueError("trading_pairs must name at least one symbol")


@dataclass(frozen=True)
class SignalConfig:
    """Configuration for signal generation."""
    # Indicator enable/disable
    use_ema: bool = True
    use_rsi: bool = True
    use_macd: bool = True

    # EMA parameters
    ema_short_period: int = EMA_SHORT_PERIOD
    ema_long_period: int = EMA_LONG_PERIOD

    # RSI parameters
    rsi_period: int = RSI_PERIOD
    rsi_overbought: float = RSI_OVERBOUGHT
    rsi_oversold: float = RSI_OVERSOLD

    # MACD parameters
    macd_fast: int = MACD_FAST
    macd_slow: int = MACD_SLOW
    macd_signal: int = MACD_SIGNAL

    # Symbols evaluated by the CLI / engine when none are given explicitly
    trading_pairs: Tuple[str, ...] = field(default=DEFAULT_TRADING_PAIRS)

    name: str = "default"

    def __post_init__(self):
        # Lists from YAML are accepted but stored as a tuple
        object.__setattr__(self, "trading_pairs", tuple(self.trading_pairs))
        _validate_config(
            ema_short_period=self.ema_short_period,
            ema_long_period=self.ema_long_period,
            rsi_period=self.rsi_period,
            rsi_oversold=self.rsi_oversold,
            rsi_overbought=self.rsi_overbought,
            macd_fast=self.macd_fast,
            macd_slow=self.macd_slow,
            macd_signal=self.macd_signal,
            trading_pairs=self.trading_pairs,
        )

    @property
    def enabled_indicators(self) -> List[str]:
        """Enabled indicator labels in evaluation order."""
        flags = (("ema", self.use_ema), ("rsi", self.use_rsi), ("macd", self.use_macd))
        return [label for label, enabled in flags if enabled]

    def build_generators(self, symbol: str = "") -> List[SignalGenerator]:
        """
        Return the generators enabled by this config for one symbol.

        Order: EMA, RSI, MACD.
        """
        generators: List[SignalGenerator] = []
        if self.use_ema:
            generators.append(EMASignal(self.ema_short_period, self.ema_long_period, symbol=symbol))
        if self.use_rsi:
            generators.append(
                RSISignal(self.rsi_period, self.rsi_overbought, self.rsi_oversold, symbol=symbol)
            )
        if self.use_macd:
            generators.append(
                MACDSignal(self.macd_fast, self.macd_slow, self.macd_signal, symbol=symbol)
            )
        return generators

    def with_trading_pairs(self, trading_pairs: Optional[Tuple[str, ...]]) -> "SignalConfig":
        """Copy of this config with different symbols (unchanged if None)."""
        if trading_pairs is None:
            return self
        return replace(self, trading_pairs=tuple(trading_pairs))


BASELINE_CONFIG = SignalConfig(name="baseline")
