"""Centralized logging configuration for the shopflow suite."""

import logging
import os
import sys
from typing import Optional


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure and return the suite logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("shopflow")

    if logger.handlers:
        return logger

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # pytest's caplog hooks the root logger, so keep propagation on
    logger.propagate = True

    return logger


def get_logger() -> logging.Logger:
    """Get the suite logger instance."""
    return logging.getLogger("shopflow")


def log_step(number: int, total: int, message: str) -> None:
    """Log the start of a purchase-flow step.

    Args:
        number: 1-based step number
        total: Total number of steps in the flow
        message: Human readable description of the step
    """
    get_logger().info(f"Step {number}/{total}: {message}")


def log_stage_result(
    stage: str, success: bool, extra_data: Optional[dict] = None
) -> None:
    """Log the outcome of a purchase-flow stage.

    Args:
        stage: Stage name
        success: Whether the stage's checks passed
        extra_data: Optional values observed during the stage
    """
    log_data = {"stage": stage, "success": success}

    if extra_data:
        log_data.update(extra_data)

    level = logging.INFO if success else logging.WARNING
    get_logger().log(level, f"Stage result: {log_data}")


def log_retry(attempt: int, max_retries: int, error: Exception, delay: Optional[float]) -> None:
    """Log a failed attempt inside a retry loop.

    Args:
        attempt: 1-based number of the attempt that failed
        max_retries: Total attempts allowed
        error: Exception raised by the attempt
        delay: Seconds before the next attempt, or None when retries are exhausted
    """
    log_data = {
        "attempt": attempt,
        "max_retries": max_retries,
        "error_type": type(error).__name__,
        "error_message": str(error).splitlines()[0] if str(error) else "",
    }

    if delay is not None:
        log_data["retry_in_seconds"] = delay

    get_logger().warning(f"Attempt failed: {log_data}")


# Initialize logging on import
_log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(_log_level)
