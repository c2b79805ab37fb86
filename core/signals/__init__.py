"""
Signal generation module.

EMA, RSI and MACD generators share one interface (SignalGenerator): they
calculate an indicator curve from price data and interpret its latest value
as a TradingSignal with a confidence score.
"""
from .base import SignalGenerator
from .generators import EMASignal, RSISignal, MACDSignal
from .config import SignalConfig, BASELINE_CONFIG
from .config_loader import load_config_from_yaml, save_config_to_yaml, apply_env_overrides
from .engine import SignalEngine, SymbolEvaluation, signals_frame

__all__ = [
    'SignalGenerator',
    'EMASignal',
    'RSISignal',
    'MACDSignal',
    'SignalConfig',
    'BASELINE_CONFIG',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'apply_env_overrides',
    'SignalEngine',
    'SymbolEvaluation',
    'signals_frame',
]
