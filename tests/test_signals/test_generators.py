"""
Tests for the EMA, RSI and MACD signal generators.
"""
import pytest
import numpy as np
import pandas as pd

from core.indicators.technical import calculate_ema, calculate_rsi
from core.signals.base import SignalGenerator
from core.signals.generators import EMASignal, RSISignal, MACDSignal
from core.shared.errors import InsufficientDataError, CalculationError, SignalError
from core.shared.types import SignalType, TradingSignal


@pytest.fixture
def random_walk():
    """Positive random-walk prices."""
    rng = np.random.default_rng(7)
    return 100 * np.exp(np.cumsum(rng.normal(0, 0.02, 200)))


def _names(signal):
    return [ind.name for ind in signal.indicators]


class TestEMASignal:
    """Test EMA crossover signals."""

    def test_constant_series_tie_is_sell(self):
        """Equal EMAs fall into the sell branch with zero confidence."""
        gen = EMASignal(short_period=2, long_period=3, symbol="BTCUSDT")
        signal = gen.generate_signal([10, 10, 10, 10, 10])

        assert signal.signal_type == SignalType.SELL
        assert signal.confidence == 0.0
        assert signal.price == 10.0
        assert signal.symbol == "BTCUSDT"
        assert signal.indicator("EMA Short").signal == SignalType.SELL
        assert signal.indicator("EMA Long").signal == SignalType.HOLD

    def test_golden_cross_is_buy(self):
        prices = [float(p) for p in range(1, 11)]
        gen = EMASignal(short_period=2, long_period=3)
        signal = gen.generate_signal(prices)

        short = calculate_ema(prices, 2)[-1]
        long = calculate_ema(prices, 3)[-1]
        assert short > long
        assert signal.signal_type == SignalType.BUY
        assert signal.confidence == pytest.approx((short - long) / long * 100)
        assert signal.indicator("EMA Short").signal == SignalType.BUY

    def test_death_cross_is_sell(self):
        prices = [float(p) for p in range(20, 10, -1)]
        gen = EMASignal(short_period=2, long_period=3)
        signal = gen.generate_signal(prices)

        short = calculate_ema(prices, 2)[-1]
        long = calculate_ema(prices, 3)[-1]
        assert signal.signal_type == SignalType.SELL
        assert signal.confidence == pytest.approx((long - short) / short * 100)

    def test_confidence_capped_at_100(self):
        """A collapse far below the long EMA saturates confidence."""
        gen = EMASignal(short_period=1, long_period=3)
        signal = gen.generate_signal([1000.0, 1000.0, 1000.0, 1.0])
        assert signal.signal_type == SignalType.SELL
        assert signal.confidence == 100.0

    def test_insufficient_data(self):
        gen = EMASignal(short_period=2, long_period=3)
        with pytest.raises(InsufficientDataError, match="Insufficient data for EMA") as exc_info:
            gen.generate_signal([1.0, 2.0])
        assert exc_info.value.required == 3
        assert exc_info.value.actual == 2

    def test_exactly_long_period_succeeds(self):
        gen = EMASignal(short_period=2, long_period=3)
        signal = gen.generate_signal([1.0, 2.0, 3.0])
        assert signal.signal_type in (SignalType.BUY, SignalType.SELL)

    def test_empty_short_curve_is_calculation_error(self):
        """Short period longer than long period leaves the short EMA empty."""
        gen = EMASignal(short_period=5, long_period=3)
        with pytest.raises(CalculationError, match="Failed to calculate EMA"):
            gen.generate_signal([1.0, 2.0, 3.0, 4.0])

    def test_calculate_returns_short_curve(self, random_walk):
        gen = EMASignal(short_period=12, long_period=26)
        np.testing.assert_array_equal(gen.calculate(random_walk), calculate_ema(random_walk, 12))

    def test_invalid_period(self):
        with pytest.raises(ValueError, match="short_period must be >= 1"):
            EMASignal(short_period=0, long_period=3)


class TestRSISignal:
    """Test RSI level signals."""

    def test_all_gains_is_overbought(self):
        """RSI 100 is above overbought, so the sell branch applies at full confidence."""
        gen = RSISignal(period=3)
        signal = gen.generate_signal([1, 2, 3, 4, 5])

        assert signal.indicator("RSI").value == 100.0
        assert signal.signal_type == SignalType.SELL
        assert signal.confidence == 100.0

    def test_all_losses_is_oversold(self):
        gen = RSISignal(period=3)
        signal = gen.generate_signal([5, 4, 3, 2, 1])

        assert signal.indicator("RSI").value == 0.0
        assert signal.signal_type == SignalType.BUY
        assert signal.confidence == 100.0

    def test_neutral_midpoint_is_hold_with_zero_confidence(self):
        gen = RSISignal(period=2)
        signal = gen.generate_signal([1, 2, 1])

        assert signal.indicator("RSI").value == 50.0
        assert signal.signal_type == SignalType.HOLD
        assert signal.confidence == 0.0

    def test_indicators(self):
        gen = RSISignal(period=2, overbought=80, oversold=20)
        signal = gen.generate_signal([1, 2, 1, 2])

        assert _names(signal) == ["RSI", "RSI Oversold", "RSI Overbought"]
        assert signal.indicator("RSI").value == 75.0
        assert signal.indicator("RSI").signal == signal.signal_type == SignalType.HOLD
        assert signal.indicator("RSI Oversold").value == 20.0
        assert signal.indicator("RSI Overbought").value == 80.0
        assert signal.indicator("RSI Oversold").signal == SignalType.HOLD
        assert signal.indicator("RSI Overbought").signal == SignalType.HOLD

    @pytest.mark.parametrize(
        "rsi_value, expected_type, expected_confidence",
        [
            (30.0, SignalType.BUY, 0.0),
            (20.0, SignalType.BUY, 100.0 / 3),
            (0.0, SignalType.BUY, 100.0),
            (70.0, SignalType.SELL, 0.0),
            (85.0, SignalType.SELL, 50.0),
            (100.0, SignalType.SELL, 100.0),
            (50.0, SignalType.HOLD, 0.0),
            (60.0, SignalType.HOLD, 25.0),
            (40.0, SignalType.HOLD, 25.0),
        ],
    )
    def test_classify(self, rsi_value, expected_type, expected_confidence):
        gen = RSISignal()
        signal_type, confidence = gen.classify(rsi_value)
        assert signal_type == expected_type
        assert confidence == pytest.approx(expected_confidence)

    def test_neutral_zone_capped_at_50(self):
        gen = RSISignal()
        for rsi_value in np.linspace(30.01, 69.99, 50):
            signal_type, confidence = gen.classify(rsi_value)
            assert signal_type == SignalType.HOLD
            assert 0 <= confidence <= 50

    def test_period_length_is_insufficient(self):
        """len == period is not enough; period + 1 is."""
        gen = RSISignal(period=3)
        with pytest.raises(InsufficientDataError, match="Insufficient data for RSI"):
            gen.generate_signal([1.0, 2.0, 3.0])
        assert gen.generate_signal([1.0, 2.0, 3.0, 4.0]).price == 4.0

    def test_calculate_returns_rsi_curve(self, random_walk):
        gen = RSISignal(period=14)
        np.testing.assert_array_equal(gen.calculate(random_walk), calculate_rsi(random_walk, 14))

    @pytest.mark.parametrize("oversold, overbought", [(70, 30), (0, 70), (30, 100), (50, 50)])
    def test_invalid_thresholds(self, oversold, overbought):
        with pytest.raises(ValueError, match="RSI thresholds"):
            RSISignal(period=14, overbought=overbought, oversold=oversold)


class TestMACDSignal:
    """Test MACD crossover signals."""

    def test_small_example_succeeds(self):
        """slow + signal = 5 <= 7 prices; linear series has ~zero histogram."""
        gen = MACDSignal(fast_period=2, slow_period=3, signal_period=2)
        signal = gen.generate_signal([1, 2, 3, 4, 5, 6, 7])

        assert signal.price == 7.0
        assert _names(signal) == ["MACD Line", "Signal Line", "Histogram"]
        assert signal.indicator("MACD Line").value == pytest.approx(0.5)
        assert signal.indicator("Histogram").value == pytest.approx(0.0, abs=1e-12)
        assert signal.confidence == pytest.approx(0.0, abs=1e-9)

    def test_accelerating_uptrend_is_buy(self):
        prices = 100 * 1.02 ** np.arange(80)
        gen = MACDSignal()
        signal = gen.generate_signal(prices)

        _, _, histogram = gen.calculate_components(prices)
        expected = min(100.0, abs(histogram[-1] / prices[-1] * 100) * 10)
        assert signal.signal_type == SignalType.BUY
        assert signal.confidence == pytest.approx(expected)
        assert signal.indicator("MACD Line").signal == SignalType.BUY
        assert signal.indicator("Signal Line").signal == SignalType.HOLD
        assert signal.indicator("Histogram").signal == SignalType.BUY

    def test_accelerating_downtrend_is_sell(self):
        prices = 1000 - 1.03 ** np.arange(80)
        gen = MACDSignal()
        signal = gen.generate_signal(prices)

        assert signal.signal_type == SignalType.SELL
        assert 0 < signal.confidence <= 100
        assert signal.indicator("Histogram").signal == SignalType.SELL

    def test_insufficient_data(self):
        gen = MACDSignal(fast_period=2, slow_period=3, signal_period=2)
        with pytest.raises(InsufficientDataError, match="need at least 5 prices, got 4"):
            gen.generate_signal([1, 2, 3, 4])

    def test_exactly_minimum_length_succeeds(self):
        gen = MACDSignal()
        prices = 100 + np.sin(np.arange(35) / 3.0)
        signal = gen.generate_signal(prices)
        assert signal.price == prices[-1]

    def test_empty_macd_line_is_calculation_error(self):
        """Fast period longer than the series leaves the MACD line empty."""
        gen = MACDSignal(fast_period=20, slow_period=3, signal_period=2)
        with pytest.raises(CalculationError, match="Failed to calculate MACD"):
            gen.generate_signal(list(range(1, 11)))

    def test_calculate_returns_macd_line(self, random_walk):
        gen = MACDSignal()
        macd_line, _, _ = gen.calculate_components(random_walk)
        np.testing.assert_array_equal(gen.calculate(random_walk), macd_line)
        assert len(gen.calculate([1.0, 2.0])) == 0


class TestGeneratorsPolymorphic:
    """Generators used through the shared interface."""

    @pytest.fixture
    def generators(self):
        return [
            EMASignal(12, 26, symbol="ETHUSDT"),
            RSISignal(14, 70.0, 30.0, symbol="ETHUSDT"),
            MACDSignal(12, 26, 9, symbol="ETHUSDT"),
        ]

    def test_heterogeneous_dispatch(self, generators, random_walk):
        for gen in generators:
            assert isinstance(gen, SignalGenerator)
            signal = gen.generate_signal(random_walk)
            assert isinstance(signal, TradingSignal)
            assert signal.symbol == "ETHUSDT"
            assert signal.price == random_walk[-1]
            assert len(signal.indicators) > 0
            assert len(gen.calculate(random_walk)) > 0

    def test_confidence_bounds(self, generators):
        rng = np.random.default_rng(3)
        for _ in range(20):
            prices = 50 * np.exp(np.cumsum(rng.normal(0, 0.05, 60)))
            for gen in generators:
                signal = gen.generate_signal(prices)
                assert 0 <= signal.confidence <= 100
                if gen.name == "rsi" and signal.signal_type == SignalType.HOLD:
                    assert signal.confidence <= 50

    def test_deterministic_apart_from_timestamp(self, generators, random_walk):
        for gen in generators:
            first = gen.generate_signal(random_walk).to_dict()
            second = gen.generate_signal(random_walk).to_dict()
            first.pop("timestamp")
            second.pop("timestamp")
            assert first == second

    def test_minimum_lengths(self, generators, random_walk):
        """Below min_length fails with InsufficientDataError; at min_length it succeeds."""
        for gen in generators:
            with pytest.raises(InsufficientDataError):
                gen.generate_signal(random_walk[:gen.min_length - 1])
            signal = gen.generate_signal(random_walk[:gen.min_length])
            assert signal.price == random_walk[gen.min_length - 1]

    def test_errors_share_base_class(self, generators):
        for gen in generators:
            with pytest.raises(SignalError) as exc_info:
                gen.generate_signal([1.0])
            assert exc_info.value.indicator == gen.name
            assert exc_info.value.symbol == "ETHUSDT"

    def test_accepts_pandas_series(self, generators, random_walk):
        series = pd.Series(random_walk, index=pd.date_range("2024-01-01", periods=len(random_walk)))
        for gen in generators:
            assert gen.generate_signal(series).price == random_walk[-1]

    def test_configuration_is_read_only(self, generators):
        with pytest.raises(AttributeError):
            generators[0].short_period = 5
        with pytest.raises(AttributeError):
            generators[1].overbought = 90.0
        with pytest.raises(AttributeError):
            generators[2].signal_period = 3
