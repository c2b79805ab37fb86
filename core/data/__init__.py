"""
Price data module.

Reads closing-price series from CSV files for command-line evaluation.
"""
from .loader import load_price_series, load_price_map

__all__ = [
    'load_price_series',
    'load_price_map',
]
