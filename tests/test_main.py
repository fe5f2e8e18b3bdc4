import logging

import pytest
from click.testing import CliRunner

from housing_regression.main import cli, run_pipeline
from housing_regression.models.train import Trainer


def test_run_pipeline_predicts_sample_sizes():
    result = run_pipeline()
    assert result.trainer is Trainer.SDCA
    assert [p.size for p in result.predictions] == [700.0, 1300.0, 2500.0]


def test_run_pipeline_is_deterministic():
    first = run_pipeline(trainer=Trainer.FAST_TREE)
    second = run_pipeline(trainer=Trainer.FAST_TREE)
    assert first.metrics == second.metrics
    assert first.predictions == second.predictions


def test_cli_default_run(caplog):
    with caplog.at_level(logging.INFO):
        result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0, result.output

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Starting housing price regression..."
    assert messages[-1] == "Housing price regression finished."
    predicted = [m for m in messages if m.startswith("Predicted price for a ")]
    assert [m.split(" sqft")[0] for m in predicted] == [
        "Predicted price for a 700",
        "Predicted price for a 1300",
        "Predicted price for a 2500",
    ]


@pytest.mark.parametrize("name", ["tree-ensemble", "least-squares", "FASTTREE"])
def test_cli_accepts_trainer_descriptions(name, caplog):
    with caplog.at_level(logging.INFO):
        result = CliRunner().invoke(cli, ["--trainer", name, "--no-pause"])
    assert result.exit_code == 0, result.output
    expected = Trainer.parse(name).description
    assert f"Building and training the {expected} model..." in caplog.text


def test_cli_fasttree_with_saved_model(tmp_path):
    path = tmp_path / "ft.joblib"
    result = CliRunner().invoke(
        cli, ["--trainer", "fasttree", "--save-model", "--model-path", str(path), "--no-pause"]
    )
    assert result.exit_code == 0, result.output
    assert path.exists()


def test_cli_rejects_unknown_trainer():
    result = CliRunner().invoke(cli, ["--trainer", "svm"])
    assert result.exit_code != 0
