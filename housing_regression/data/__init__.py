"""
Data package for constructing the housing training dataset.

This package exposes the fixed sample dataset used to train and evaluate the
price model, together with the dataset invariants check.
"""
