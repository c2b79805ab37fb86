"""
Error taxonomy for signal generation.

Generators raise these; callers (engine, CLI, HTTP layer) decide how to
report them. Results are a pure function of the input, so none are retried.
"""
from typing import Optional


class SignalError(Exception):
    """Base class for failures while turning a price series into a signal."""

    def __init__(self, message: str, symbol: str = "", indicator: Optional[str] = None):
        super().__init__(message)
        self.symbol = symbol
        self.indicator = indicator


class InsufficientDataError(SignalError):
    """Price series is shorter than the indicator's minimum length."""

    def __init__(self, indicator: str, required: int, actual: int, symbol: str = ""):
        super().__init__(
            f"Insufficient data for {indicator.upper()} calculation: "
            f"need at least {required} prices, got {actual}",
            symbol=symbol,
            indicator=indicator,
        )
        self.required = required
        self.actual = actual


class CalculationError(SignalError):
    """An intermediate series came out empty although the length check passed."""

    def __init__(self, indicator: str, detail: str = "", symbol: str = ""):
        message = f"Failed to calculate {indicator.upper()} values"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, symbol=symbol, indicator=indicator)
