"""
Evaluation utilities for the housing price model.

`evaluate_model()` re-applies a fitted pipeline to a dataset and aggregates
regression metrics. The CLI evaluates on the training data itself, so the
numbers describe fit quality rather than generalisation.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from sklearn.pipeline import Pipeline

from housing_regression.config import FEATURE_COLUMN, LABEL_COLUMN
from housing_regression.data.load_data import validate_dataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationMetrics:
    r_squared: float
    mean_absolute_error: float
    mean_squared_error: float
    root_mean_squared_error: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def compute_metrics(y_true, y_pred) -> EvaluationMetrics:
    """
    Aggregate R², MAE, MSE and RMSE for paired label/prediction arrays.
    """
    mse = float(mean_squared_error(y_true, y_pred))
    return EvaluationMetrics(
        r_squared=float(r2_score(y_true, y_pred)),
        mean_absolute_error=float(mean_absolute_error(y_true, y_pred)),
        mean_squared_error=mse,
        root_mean_squared_error=float(np.sqrt(mse)),
    )


def evaluate_model(model: Pipeline, df: pd.DataFrame) -> EvaluationMetrics:
    """
    Score `model` on `df` and log the metrics.

    Parameters
    ----------
    model : Pipeline
        Fitted pipeline from `train_model`.
    df : pd.DataFrame
        Dataset with `size` and `price` columns.

    Returns
    -------
    EvaluationMetrics
    """
    df = validate_dataset(df)
    y_pred = model.predict(df[[FEATURE_COLUMN]])
    metrics = compute_metrics(df[LABEL_COLUMN].to_numpy(), y_pred)

    logger.info("Model Evaluation Metrics:")
    logger.info("R-Squared: %s", metrics.r_squared)
    logger.info("Mean Absolute Error: %s", metrics.mean_absolute_error)
    logger.debug("Root Mean Squared Error: %s", metrics.root_mean_squared_error)
    return metrics
