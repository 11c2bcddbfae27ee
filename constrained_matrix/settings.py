"""
Settings for the constrained matrix kit.
Read from the environment so behavior can be switched without code changes.
"""
import logging
import os


_FALSEY = {"0", "false", "no", "off"}


class MatrixSettings:
    """Matrix settings with environment variable support."""

    def __init__(self):
        # Validate every element handed to Matrix.from_rows (0 keeps the legacy unchecked path)
        self.validate_supplied_data: bool = (
            os.getenv("MATRIX_VALIDATE_SUPPLIED_DATA", "1").strip().lower() not in _FALSEY
        )
        self.log_level: str = os.getenv("MATRIX_LOG_LEVEL", "WARNING").strip().upper()


settings = MatrixSettings()


def configure_logging(level=None) -> logging.Logger:
    """Apply ``level`` (default: settings.log_level) to the package logger."""
    logger = logging.getLogger("constrained_matrix")
    logger.setLevel(level or settings.log_level)
    return logger
