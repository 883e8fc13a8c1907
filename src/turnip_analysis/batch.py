"""
Batch analysis of many periods with pandas.

Input frames have one row per week: a base_price column, an optional
previous_pattern column, and one column per half-day (mon_am .. sat_pm).
Empty cells are missed prices.
"""

import logging
import os
from typing import List, Optional

import pandas as pd

from .analysis_config import AnalysisConfig
from .analyzer import compute
from .constants import HALF_DAY_LABELS
from .errors import InconsistentObservationsError, InvalidInputError
from .types import Pattern

logger = logging.getLogger(__name__)

BASE_PRICE_COLUMN = "base_price"
PREVIOUS_PATTERN_COLUMN = "previous_pattern"
MISSING_PRICE = "?"


def load_weeks_csv(filepath: str) -> pd.DataFrame:
    """
    Load a CSV of weeks.

    Column names are lower-cased. Half-day columns that are absent are
    added as empty (all prices missed).

    Raises:
        FileNotFoundError, ValueError.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    df = pd.read_csv(filepath)
    df.columns = df.columns.str.strip().str.lower()
    if BASE_PRICE_COLUMN not in df.columns:
        raise ValueError(f"Missing required column '{BASE_PRICE_COLUMN}' in {filepath}")

    for label in HALF_DAY_LABELS:
        if label not in df.columns:
            df[label] = pd.NA
    logger.info(f"Loaded {len(df)} weeks from {filepath}")
    return df


def _row_prices(row: pd.Series) -> List[Optional[int]]:
    """Half-day prices of a row, trailing missed prices dropped."""
    prices: List[Optional[int]] = []
    for label in HALF_DAY_LABELS:
        value = row.get(label)
        if value is None or pd.isna(value) or str(value).strip() in ("", MISSING_PRICE):
            prices.append(None)
            continue
        try:
            number = float(value)
        except ValueError as e:
            raise InvalidInputError(f"Price in column '{label}' is not a number: {value}") from e
        if not number.is_integer():
            raise InvalidInputError(f"Price in column '{label}' is not an integer: {value}")
        prices.append(int(number))
    while prices and prices[-1] is None:
        prices.pop()
    return prices


def _row_base_price(row: pd.Series) -> int:
    value = row.get(BASE_PRICE_COLUMN)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid base price: {value}") from e
    if pd.isna(number) or not number.is_integer():
        raise InvalidInputError(f"Invalid base price: {value}")
    return int(number)


def _row_previous(row: pd.Series) -> Optional[str]:
    value = row.get(PREVIOUS_PATTERN_COLUMN)
    if value is None or pd.isna(value) or str(value).strip() == "":
        return None
    return str(value)


def analyze_frame(
    df: pd.DataFrame,
    config: Optional[AnalysisConfig] = None,
) -> pd.DataFrame:
    """
    Posterior for every week in a frame.

    Errors are reported per row rather than raised: an invalid row gets
    its message in the 'error' column, an inconsistent row gets
    consistent=False. Probability columns are NaN for both.

    Returns:
        Frame indexed like the input with one probability column per
        pattern (named by pattern value), plus 'most_likely',
        'consistent' and 'error'.
    """
    config = config or AnalysisConfig.default()
    records = []
    for index, row in df.iterrows():
        record = {pattern.value: float("nan") for pattern in Pattern}
        record.update(most_likely=None, consistent=False, error=None)
        try:
            results = compute(
                _row_base_price(row),
                _row_prices(row),
                _row_previous(row),
                config=config,
            )
        except InvalidInputError as e:
            logger.warning(f"Row {index}: {e}")
            record["error"] = str(e)
        except InconsistentObservationsError as e:
            record["error"] = str(e)
        else:
            for result in results:
                record[result.pattern.value] = result.probability
            record["most_likely"] = results[0].pattern.value
            record["consistent"] = True
        records.append(record)

    columns = [pattern.value for pattern in Pattern] + ["most_likely", "consistent", "error"]
    return pd.DataFrame(records, index=df.index, columns=columns)


def analyze_csv(
    input_path: str,
    output_path: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
) -> pd.DataFrame:
    """
    Load, analyse and optionally write a CSV of weeks.

    The written file holds the input columns followed by the result
    columns.
    """
    weeks = load_weeks_csv(input_path)
    results = analyze_frame(weeks, config=config)
    combined = pd.concat([weeks, results], axis=1)
    if output_path:
        combined.to_csv(output_path, index=False)
        logger.info(f"Wrote {len(combined)} rows to {output_path}")
    return combined
