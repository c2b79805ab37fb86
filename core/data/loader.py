"""
Price series loader.

Loads one symbol's closing prices from a CSV file with a date (or other
sortable) first column. Used by the CLI only; the engine itself takes
plain price sequences.
"""
import pandas as pd
from pathlib import Path
from typing import Dict, Iterable, Union


def load_price_series(
    data_path: Union[str, Path],
    column: str = "Close",
) -> pd.Series:
    """
    Load a price column from CSV, sorted chronologically.

    Args:
        data_path: Path to the CSV file (first column is the index)
        column: Price column to return

    Returns:
        Series of float prices; rows with a missing price are dropped

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the column is missing
    """
    data_path = Path(data_path)
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    df = pd.read_csv(data_path, index_col=0)

    # Sort by date when the index parses as dates; otherwise keep file order
    try:
        df.index = pd.to_datetime(df.index)
        df = df.sort_index()
    except (ValueError, TypeError):
        pass

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found. Available: {list(df.columns)}")

    return df[column].astype(float).dropna()


def load_price_map(
    paths: Iterable[Union[str, Path]],
    column: str = "Close",
) -> Dict[str, pd.Series]:
    """Load several CSV files keyed by symbol (upper-cased file stem)."""
    return {
        Path(p).stem.upper(): load_price_series(p, column=column)
        for p in paths
    }
