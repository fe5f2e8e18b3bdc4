"""
Training utilities for the housing price model.

The pipeline is the feature transformer from `build_features` followed by one
of two interchangeable regressors:

- Trainer.SDCA      : ordinary least squares (sklearn LinearRegression)
- Trainer.FAST_TREE : gradient-boosted tree ensemble (XGBRegressor)

Usage (from project root)
-------------------------
from housing_regression.models.train import Trainer, train_model
model = train_model(load_sample_data(), trainer=Trainer.FAST_TREE)
"""

from __future__ import annotations

import json
import logging
import os
import platform
from enum import Enum
from typing import Dict, Optional

import joblib
import numpy as np
import pandas as pd
import sklearn
import xgboost as xgb
from sklearn.linear_model import LinearRegression
from sklearn.pipeline import Pipeline

from housing_regression.config import (
    FAST_TREE_PARAMS,
    FEATURE_COLUMN,
    LABEL_COLUMN,
    MODELS_DIR,
    RANDOM_SEED,
)
from housing_regression.data.load_data import validate_dataset
from housing_regression.exceptions import TrainingError
from housing_regression.features.build_features import build_feature_transformer

logger = logging.getLogger(__name__)


class Trainer(str, Enum):
    SDCA = "sdca"
    FAST_TREE = "fasttree"

    @property
    def description(self) -> str:
        if self is Trainer.SDCA:
            return "least-squares"
        return "tree-ensemble"

    @classmethod
    def parse(cls, value: str) -> "Trainer":
        """Accept the enum value or its description ("tree-ensemble")."""
        key = value.strip().lower()
        for trainer in cls:
            if key in (trainer.value, trainer.description):
                return trainer
        raise ValueError(f"Unknown trainer {value!r}")


def build_regressor(trainer: Trainer, seed: int = RANDOM_SEED):
    """
    Create an unfitted regressor for the selected trainer.
    """
    if trainer is Trainer.SDCA:
        return LinearRegression()
    return xgb.XGBRegressor(random_state=seed, **FAST_TREE_PARAMS)


def build_pipeline(
    trainer: Trainer = Trainer.SDCA,
    seed: int = RANDOM_SEED,
    normalize: bool = False,
) -> Pipeline:
    return Pipeline(
        steps=[
            ("preprocessor", build_feature_transformer(normalize=normalize)),
            ("regressor", build_regressor(trainer, seed=seed)),
        ]
    )


def train_model(
    df: pd.DataFrame,
    trainer: Trainer = Trainer.SDCA,
    seed: int = RANDOM_SEED,
    normalize: bool = False,
) -> Pipeline:
    """
    Fit the feature pipeline and regressor on (size -> price).

    Parameters
    ----------
    df : pd.DataFrame
        Training data with `size` and `price` columns.
    trainer : Trainer
        Regression algorithm to append to the pipeline.
    seed : int
        Random seed for reproducible fits.
    normalize : bool
        Min-max scale `size` before it enters the feature vector.

    Returns
    -------
    Pipeline
        The fitted pipeline. Callers must not refit it.

    Raises
    ------
    TrainingError
        If the framework rejects the data or the fit fails.
    """
    logger.info("Building and training the %s model...", trainer.description)
    df = validate_dataset(df)

    X = df[[FEATURE_COLUMN]]
    y = df[LABEL_COLUMN]

    pipeline = build_pipeline(trainer=trainer, seed=seed, normalize=normalize)
    try:
        pipeline.fit(X, y)
    except (ValueError, TypeError) as exc:
        raise TrainingError(trainer.value, str(exc)) from exc

    logger.info("Model training completed successfully.")
    return pipeline


def default_model_path(trainer: Trainer) -> str:
    return os.path.join(MODELS_DIR, f"{trainer.value}_housing.joblib")


def save_model(
    model: Pipeline,
    trainer: Trainer,
    metrics: Optional[Dict[str, float]] = None,
    path: Optional[str] = None,
) -> Dict:
    """
    Persist the fitted pipeline with joblib and write a metadata JSON beside it.

    Returns
    -------
    dict
        The metadata written, including `model_file` and `metadata_file`.
    """
    model_file = path or default_model_path(trainer)
    metadata_file = os.path.splitext(model_file)[0] + ".metadata.json"

    os.makedirs(os.path.dirname(os.path.abspath(model_file)), exist_ok=True)
    joblib.dump(model, model_file)

    metadata = {
        "model_name": f"Housing price regression ({trainer.description})",
        "trainer": trainer.value,
        "trained_on": pd.Timestamp.today().strftime("%Y-%m-%d"),
        "features": [FEATURE_COLUMN],
        "label": LABEL_COLUMN,
        "metrics": {k: round(float(v), 4) for k, v in (metrics or {}).items()},
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "sklearn": sklearn.__version__,
        "xgboost": xgb.__version__,
        "model_file": os.path.basename(model_file),
        "metadata_file": os.path.basename(metadata_file),
    }
    with open(metadata_file, "w", encoding="utf-8") as fh:
        json.dump(metadata, fh, indent=4)

    logger.info("Saved model to %s", model_file)
    return metadata
