"""
Signal engine running every enabled generator over a symbol's prices.

Generators are independent and stateless; the engine only collects their
output. A generator that cannot produce a signal (too little data, empty
intermediate curve) is recorded as an error for that indicator while the
remaining generators still run.
"""
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from .config import SignalConfig, BASELINE_CONFIG
from ..indicators.technical import PriceSeries
from ..shared.errors import SignalError
from ..shared.types import TradingSignal

logger = logging.getLogger(__name__)

SIGNAL_FRAME_COLUMNS = ["symbol", "indicator", "signal_type", "confidence", "price", "timestamp"]


@dataclass
class SymbolEvaluation:
    """Signals (keyed by indicator label) and per-indicator errors for one symbol."""
    symbol: str
    signals: Dict[str, TradingSignal] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.signals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "signals": [s.to_dict() for s in self.signals.values()],
            "errors": dict(self.errors),
        }


class SignalEngine:
    """
    Evaluates all indicators enabled by a SignalConfig.

    Independent symbols can be evaluated in parallel; no state is shared
    between evaluations apart from the read-only config.
    """

    def __init__(self, config: Optional[SignalConfig] = None):
        """
        Initialize the signal engine.

        Args:
            config: SignalConfig with indicator settings (default: BASELINE_CONFIG)
        """
        self.config = config or BASELINE_CONFIG

    def evaluate(self, symbol: str, prices: PriceSeries) -> SymbolEvaluation:
        """
        Run every enabled generator on one symbol's price series.

        Args:
            symbol: Symbol attached to the produced signals
            prices: Chronological closing prices

        Returns:
            SymbolEvaluation with one signal or one error per enabled indicator
        """
        evaluation = SymbolEvaluation(symbol=symbol)
        for generator in self.config.build_generators(symbol):
            try:
                evaluation.signals[generator.name] = generator.generate_signal(prices)
            except SignalError as e:
                logger.warning(f"{symbol}: {e}")
                evaluation.errors[generator.name] = str(e)

        logger.info(
            f"Evaluated {symbol}: {len(evaluation.signals)} signal(s), "
            f"{len(evaluation.errors)} error(s)"
        )
        return evaluation

    def evaluate_many(
        self,
        price_map: Mapping[str, PriceSeries],
        max_workers: Optional[int] = None,
    ) -> Dict[str, SymbolEvaluation]:
        """
        Evaluate several symbols.

        Symbols are evaluated in parallel via ThreadPoolExecutor when
        max_workers > 1.

        Args:
            price_map: symbol -> price series
            max_workers: Thread pool size (default: cpu_count); 1 = sequential.

        Returns:
            symbol -> SymbolEvaluation, in the order of price_map
        """
        workers = (
            max(1, max_workers)
            if max_workers is not None
            else (os.cpu_count() or 1)
        )

        results: Dict[str, SymbolEvaluation] = {}
        if workers <= 1 or len(price_map) <= 1:
            for symbol, prices in price_map.items():
                results[symbol] = self.evaluate(symbol, prices)
            return results

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self.evaluate, symbol, prices): symbol
                for symbol, prices in price_map.items()
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return {symbol: results[symbol] for symbol in price_map}


def signals_frame(evaluations: Mapping[str, SymbolEvaluation]) -> pd.DataFrame:
    """
    Flatten evaluations into a DataFrame with one row per produced signal.

    Columns: symbol, indicator, signal_type, confidence, price, timestamp
    """
    rows: List[Dict[str, Any]] = []
    for evaluation in evaluations.values():
        for indicator, signal in evaluation.signals.items():
            rows.append({
                "symbol": signal.symbol,
                "indicator": indicator,
                "signal_type": signal.signal_type.value,
                "confidence": signal.confidence,
                "price": signal.price,
                "timestamp": signal.timestamp,
            })
    return pd.DataFrame(rows, columns=SIGNAL_FRAME_COLUMNS)
