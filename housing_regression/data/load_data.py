"""
Build the in-memory housing training dataset.

This module provides `load_sample_data()` which returns the nine literal
(size, price) samples as a DataFrame with float columns `size` and `price`,
in their literal order.

Dataset invariants (non-empty, every size strictly positive) are enforced by
`validate_dataset()`; violations raise `DatasetError`.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from housing_regression.config import FEATURE_COLUMN, LABEL_COLUMN
from housing_regression.exceptions import DatasetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HousingSample:
    size: float
    price: float


SAMPLE_DATA = (
    HousingSample(size=600, price=100000),
    HousingSample(size=800, price=120000),
    HousingSample(size=1000, price=150000),
    HousingSample(size=1200, price=180000),
    HousingSample(size=1500, price=220000),
    HousingSample(size=1800, price=250000),
    HousingSample(size=2000, price=280000),
    HousingSample(size=2200, price=300000),
    HousingSample(size=2400, price=320000),
)


def validate_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """
    Check the dataset invariants and return the frame unchanged.

    Raises
    ------
    DatasetError
        If a column is missing, the frame is empty, or a size is not > 0.
    """
    missing = [c for c in (FEATURE_COLUMN, LABEL_COLUMN) if c not in df.columns]
    if missing:
        raise DatasetError(f"missing columns {missing}", missing=missing)
    if df.empty:
        raise DatasetError("dataset is empty", rows=0)

    sizes = df[FEATURE_COLUMN].to_numpy(dtype=float)
    bad = np.flatnonzero(~(sizes > 0))
    if bad.size:
        raise DatasetError(
            "all sizes must be > 0", rows=[int(i) for i in bad]
        )
    return df


def samples_to_frame(samples: Iterable[HousingSample]) -> pd.DataFrame:
    """
    Convert samples to the training frame, preserving order.

    Parameters
    ----------
    samples : iterable of HousingSample

    Returns
    -------
    pd.DataFrame
        Frame with float columns `size` and `price`.
    """
    df = pd.DataFrame(
        [(s.size, s.price) for s in samples],
        columns=[FEATURE_COLUMN, LABEL_COLUMN],
        dtype=float,
    )
    return validate_dataset(df)


def load_sample_data() -> pd.DataFrame:
    """
    Return the fixed housing dataset (600-2400 sqft, $100,000-$320,000).

    Returns
    -------
    pd.DataFrame
        Nine samples with float `size` and `price` columns.
    """
    logger.info("Loading sample training data...")
    return samples_to_frame(SAMPLE_DATA)
