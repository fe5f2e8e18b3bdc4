"""
housing_regression package initializer.

This package contains the project source code for loading the sample housing
dataset, building the feature pipeline, training a one-feature price
regression model, evaluating it and making predictions.

Modules
-------
- config: Central configuration, seed and path constants.
- exceptions: Error classes raised by the pipeline.
- logging_config: Console logging setup.
- data: Sample dataset construction.
- features: Feature-vector transform.
- models: Model training, evaluation, prediction and persistence.
- main: Command line entrypoint running the whole flow.
"""

__version__ = "1.0.0"
