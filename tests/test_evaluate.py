import logging

import pytest

from housing_regression.exceptions import DatasetError
from housing_regression.models.evaluate import compute_metrics, evaluate_model
from housing_regression.models.train import Trainer, train_model


def test_r_squared_in_unit_interval(trained, sample_df):
    _, model = trained
    metrics = evaluate_model(model, sample_df)
    assert 0.0 <= metrics.r_squared <= 1.0
    assert metrics.mean_absolute_error >= 0.0
    assert metrics.root_mean_squared_error ** 2 == pytest.approx(metrics.mean_squared_error)


def test_evaluation_is_reproducible(sample_df):
    for trainer in Trainer:
        first = evaluate_model(train_model(sample_df, trainer=trainer), sample_df)
        second = evaluate_model(train_model(sample_df, trainer=trainer), sample_df)
        assert first == second


def test_evaluation_logs_metrics(sdca_model, sample_df, caplog):
    with caplog.at_level(logging.INFO):
        evaluate_model(sdca_model, sample_df)
    assert "Model Evaluation Metrics:" in caplog.text
    assert "R-Squared:" in caplog.text
    assert "Mean Absolute Error:" in caplog.text


def test_compute_metrics_perfect_fit():
    metrics = compute_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    assert metrics.r_squared == 1.0
    assert metrics.mean_absolute_error == 0.0
    assert set(metrics.to_dict()) == {
        "r_squared",
        "mean_absolute_error",
        "mean_squared_error",
        "root_mean_squared_error",
    }


def test_evaluate_empty_dataset_raises(sdca_model, sample_df):
    with pytest.raises(DatasetError, match="dataset is empty"):
        evaluate_model(sdca_model, sample_df.iloc[0:0])
