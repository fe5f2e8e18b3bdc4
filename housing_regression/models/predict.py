"""
Housing Prices - Prediction Helper

Provides `predict_price(model, size)` which:
- Wraps a single size into the same one-column frame used at training time.
- Applies the fitted pipeline and returns the scalar price.

Sizes are not range-checked: values outside the 600-2400 sqft training range
are extrapolated without warning.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import joblib
import pandas as pd
from sklearn.pipeline import Pipeline

from housing_regression.config import FEATURE_COLUMN
from housing_regression.exceptions import ModelNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricePrediction:
    size: float
    predicted_price: float


def format_currency(value: float) -> str:
    """Render a price as `$1,234.56` (negative as `-$1,234.56`)."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def load_model(path: str) -> Pipeline:
    """
    Load a pipeline saved by `save_model`.

    Raises
    ------
    ModelNotFoundError
        If `path` does not exist.
    """
    if not os.path.exists(path):
        raise ModelNotFoundError(path)
    return joblib.load(path)


def predict_price(model: Pipeline, size: float) -> PricePrediction:
    """
    Predict the price of one house.

    Parameters
    ----------
    model : Pipeline
        Fitted pipeline from `train_model` or `load_model`.
    size : float
        House size in square feet.

    Returns
    -------
    PricePrediction
    """
    input_df = pd.DataFrame({FEATURE_COLUMN: [float(size)]})
    preds = model.predict(input_df)
    prediction = PricePrediction(size=float(size), predicted_price=float(preds[0]))

    logger.info(
        "Predicted price for a %g sqft house: %s",
        prediction.size,
        format_currency(prediction.predicted_price),
    )
    return prediction
