"""
Command line entrypoint: train, evaluate and demo the housing price model.

Usage (from project root)
-------------------------
python -m housing_regression                       # least squares, waits for a key
python -m housing_regression --trainer fasttree --no-pause
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import click
from sklearn.pipeline import Pipeline

from housing_regression.config import RANDOM_SEED, SAMPLE_SIZES
from housing_regression.data.load_data import load_sample_data
from housing_regression.logging_config import configure_logging
from housing_regression.models.evaluate import EvaluationMetrics, evaluate_model
from housing_regression.models.predict import PricePrediction, predict_price
from housing_regression.models.train import Trainer, save_model, train_model

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    trainer: Trainer
    model: Pipeline
    metrics: EvaluationMetrics
    predictions: List[PricePrediction]


def run_pipeline(
    trainer: Trainer = Trainer.SDCA,
    seed: int = RANDOM_SEED,
    sizes: Iterable[float] = SAMPLE_SIZES,
    normalize: bool = False,
    save: bool = False,
    model_path: Optional[str] = None,
) -> RunResult:
    """
    Load data, train, evaluate on the training set and predict each size.

    Errors from any step propagate unchanged.
    """
    df = load_sample_data()
    model = train_model(df, trainer=trainer, seed=seed, normalize=normalize)
    metrics = evaluate_model(model, df)
    predictions = [predict_price(model, size) for size in sizes]

    if save:
        save_model(model, trainer, metrics=metrics.to_dict(), path=model_path)

    return RunResult(trainer=trainer, model=model, metrics=metrics, predictions=predictions)


@click.command()
@click.option(
    "--trainer",
    type=click.Choice(
        [t.value for t in Trainer] + [t.description for t in Trainer],
        case_sensitive=False,
    ),
    default=Trainer.SDCA.value,
    show_default=True,
    help="Regression algorithm: sdca/least-squares or fasttree/tree-ensemble.",
)
@click.option("--seed", type=int, default=RANDOM_SEED, show_default=True)
@click.option("--normalize/--no-normalize", default=False, help="Min-max scale size first.")
@click.option("--save-model/--no-save-model", default=False, help="Write the model to models/.")
@click.option("--model-path", type=click.Path(dir_okay=False), default=None)
@click.option("--pause/--no-pause", default=True, help="Wait for a key before exiting.")
def cli(trainer, seed, normalize, save_model, model_path, pause):
    """Train and demo a one-feature housing price regression."""
    configure_logging()
    logger.info("Starting housing price regression...")

    run_pipeline(
        trainer=Trainer.parse(trainer),
        seed=seed,
        normalize=normalize,
        save=save_model,
        model_path=model_path,
    )

    logger.info("Housing price regression finished.")
    if pause:
        click.pause("Press any key to exit...")


if __name__ == "__main__":
    cli()
