"""
Central configuration for the project.

This module centralizes environment-independent constants and derived paths
used throughout the codebase (seed, column names, logging, model paths).

Constants
---------
RANDOM_SEED : int
    Seed passed to every trainer so repeated runs are reproducible.
FEATURE_COLUMN, LABEL_COLUMN, FEATURES_COLUMN : str
    Raw feature column, label column and the concatenated feature vector name.
SAMPLE_SIZES : tuple of float
    House sizes (sqft) predicted at the end of a run.
BASE_DIR, MODELS_DIR : str
    Absolute path to the project root and the model artifact folder.
LOG_LEVEL, LOG_FORMAT : str
    Console logging settings. LOG_LEVEL honours HOUSING_LOG_LEVEL.
FAST_TREE_PARAMS : dict
    XGBoost hyperparameters for the tree-ensemble trainer.
"""

import os

RANDOM_SEED = 0

FEATURE_COLUMN = "size"
LABEL_COLUMN = "price"
FEATURES_COLUMN = "features"

SAMPLE_SIZES = (700.0, 1300.0, 2500.0)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
MODELS_DIR = os.path.join(BASE_DIR, "models")

LOG_LEVEL = os.getenv("HOUSING_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# n_jobs=1 keeps the boosted trees bit-identical between runs
FAST_TREE_PARAMS = {
    "n_estimators": 200,
    "learning_rate": 0.1,
    "max_depth": 3,
    "min_child_weight": 1,
    "subsample": 1.0,
    "colsample_bytree": 1.0,
    "objective": "reg:squarederror",
    "tree_method": "exact",
    "n_jobs": 1,
    "verbosity": 0,
}
