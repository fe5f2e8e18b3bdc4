"""
Feature utilities for the housing dataset.

The model sees a single feature vector column built from `size`.
"""
from typing import List, Optional

from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import MinMaxScaler

from housing_regression.config import FEATURE_COLUMN, FEATURES_COLUMN


def build_feature_transformer(
    feature_cols: Optional[List[str]] = None,
    normalize: bool = False,
) -> ColumnTransformer:
    """
    Concatenate the feature columns into one `features` vector.

    Parameters
    ----------
    feature_cols : list of str or None
        Columns to concatenate. Defaults to [`size`].
    normalize : bool
        Min-max scale the columns before concatenation.
    """
    if feature_cols is None:
        feature_cols = [FEATURE_COLUMN]

    if normalize:
        transformer = Pipeline(steps=[("normalize", MinMaxScaler())])
    else:
        transformer = "passthrough"

    return ColumnTransformer(
        transformers=[(FEATURES_COLUMN, transformer, feature_cols)],
        remainder="drop",
    )
