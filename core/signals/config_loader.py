"""
YAML configuration loader for the signal engine.

Loads indicator parameters and trading pairs from YAML files, allowing easy
sharing and modification of settings without code changes. The
TRADING_PAIRS environment variable can override the configured symbols.
"""
import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

import yaml

from .config import SignalConfig
from ..shared.defaults import (
    RSI_PERIOD, RSI_OVERSOLD, RSI_OVERBOUGHT,
    EMA_SHORT_PERIOD, EMA_LONG_PERIOD,
    MACD_FAST, MACD_SLOW, MACD_SIGNAL,
    DEFAULT_TRADING_PAIRS,
)

logger = logging.getLogger(__name__)

TRADING_PAIRS_ENV = "TRADING_PAIRS"


def parse_trading_pairs(raw: str) -> Tuple[str, ...]:
    """Split a comma separated symbol list, trimming whitespace and dropping blanks."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_config_from_yaml(yaml_path: Union[str, Path]) -> SignalConfig:
    """
    Load signal configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        SignalConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or parameters are invalid
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")

    name = config_dict.get('name', yaml_path.stem)

    indicators = config_dict.get('indicators', {}) or {}
    ema = indicators.get('ema', {}) or {}
    rsi = indicators.get('rsi', {}) or {}
    macd = indicators.get('macd', {}) or {}

    data_params = config_dict.get('data', {}) or {}
    raw_pairs = data_params.get('trading_pairs')
    if raw_pairs is None or (isinstance(raw_pairs, list) and len(raw_pairs) == 0):
        trading_pairs = DEFAULT_TRADING_PAIRS
    elif isinstance(raw_pairs, str):
        trading_pairs = parse_trading_pairs(raw_pairs)
    else:
        trading_pairs = tuple(str(p).strip() for p in raw_pairs)

    config = SignalConfig(
        name=name,

        # EMA
        use_ema=ema.get('enabled', True),
        ema_short_period=ema.get('short_period', EMA_SHORT_PERIOD),
        ema_long_period=ema.get('long_period', EMA_LONG_PERIOD),

        # RSI
        use_rsi=rsi.get('enabled', True),
        rsi_period=rsi.get('period', RSI_PERIOD),
        rsi_overbought=float(rsi.get('overbought', RSI_OVERBOUGHT)),
        rsi_oversold=float(rsi.get('oversold', RSI_OVERSOLD)),

        # MACD
        use_macd=macd.get('enabled', True),
        macd_fast=macd.get('fast', MACD_FAST),
        macd_slow=macd.get('slow', MACD_SLOW),
        macd_signal=macd.get('signal', MACD_SIGNAL),

        # Data
        trading_pairs=trading_pairs,
    )
    logger.debug(f"Loaded config '{config.name}' from {yaml_path}")
    return config


def save_config_to_yaml(config: SignalConfig, yaml_path: Union[str, Path]):
    """
    Save signal configuration to YAML file.

    Args:
        config: SignalConfig object to save
        yaml_path: Path where to save YAML file
    """
    yaml_path = Path(yaml_path)

    config_dict = {
        'name': config.name,
        'indicators': {
            'ema': {
                'enabled': config.use_ema,
                'short_period': config.ema_short_period,
                'long_period': config.ema_long_period,
            },
            'rsi': {
                'enabled': config.use_rsi,
                'period': config.rsi_period,
                'overbought': config.rsi_overbought,
                'oversold': config.rsi_oversold,
            },
            'macd': {
                'enabled': config.use_macd,
                'fast': config.macd_fast,
                'slow': config.macd_slow,
                'signal': config.macd_signal,
            },
        },
        'data': {
            'trading_pairs': list(config.trading_pairs),
        },
    }

    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    with open(yaml_path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def apply_env_overrides(
    config: SignalConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> SignalConfig:
    """
    Apply environment overrides to a config.

    Currently honors TRADING_PAIRS (comma separated). Unset or blank values
    leave the config unchanged.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(TRADING_PAIRS_ENV, "")
    pairs = parse_trading_pairs(raw)
    if not pairs:
        return config
    logger.info(f"Using trading pairs from {TRADING_PAIRS_ENV}: {', '.join(pairs)}")
    return config.with_trading_pairs(pairs)
