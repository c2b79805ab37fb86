"""Small numeric helpers shared by the CLI and the engine."""
from typing import Dict, Mapping, Any


def round_decimal(value: float, decimals: int) -> float:
    """Round half away from zero to a fixed number of decimals."""
    factor = 10.0 ** decimals
    scaled = abs(value) * factor
    rounded = float(int(scaled + 0.5)) / factor
    return rounded if value >= 0 else -rounded


def format_price_data(data: Mapping[str, Any]) -> Dict[str, float]:
    """
    Parse a symbol -> price mapping whose prices arrive as strings.

    Entries that are not strings or do not parse as floats are dropped.
    """
    result = {}
    for symbol, value in data.items():
        if not isinstance(value, str):
            continue
        try:
            result[symbol] = float(value)
        except ValueError:
            continue
    return result
