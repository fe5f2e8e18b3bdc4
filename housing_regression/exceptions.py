"""
Exception classes for the housing regression pipeline.

Every error carries a human readable message, a short machine readable
error code and a details dict for logging.
"""

from typing import Optional, Dict, Any


class HousingRegressionError(Exception):
    """
    Base exception class for all pipeline errors.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class DatasetError(HousingRegressionError):
    """Raised when the training dataset breaks its invariants."""

    def __init__(self, reason: str, **details: Any):
        super().__init__(
            message=f"Invalid housing dataset: {reason}",
            error_code="INVALID_DATASET",
            details=details,
        )


class TrainingError(HousingRegressionError):
    """Raised when the regression pipeline fails to fit."""

    def __init__(self, trainer: str, reason: str):
        super().__init__(
            message=f"Failed to train {trainer} model: {reason}",
            error_code="TRAINING_FAILED",
            details={"trainer": trainer, "reason": reason},
        )


class ModelNotFoundError(HousingRegressionError):
    """Raised when a persisted model file does not exist."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Model file not found at {path}. Run with --save-model first.",
            error_code="MODEL_NOT_FOUND",
            details={"path": path},
        )


class ConfigurationError(HousingRegressionError):
    """Raised when a configuration value cannot be used."""

    def __init__(self, setting: str, value: str, reason: str):
        super().__init__(
            message=f"Invalid {setting}={value!r}: {reason}",
            error_code="INVALID_CONFIGURATION",
            details={"setting": setting, "value": value},
        )
