"""
Model utilities package.

This package contains helper modules for training the price model, evaluating
it and making predictions. Typical entrypoints are:

- housing_regression.models.train.train_model()      : build and fit the pipeline
- housing_regression.models.evaluate.evaluate_model(): R² and MAE on a dataset
- housing_regression.models.predict.predict_price()  : single-house prediction
"""
