# core/config_validator.py

import os
from typing import List
from core.config import settings
from core.logging_config import logger

SUPPORTED_STORAGE_BACKENDS = ("memory", "file")


def validate_required_config() -> List[str]:
    """
    Validate settings the app cannot start without.
    Returns list of problems found.
    """
    problems = []

    backend = (settings.SESSION_STORAGE_BACKEND or "").lower()
    if backend not in SUPPORTED_STORAGE_BACKENDS:
        problems.append(
            f"SESSION_STORAGE_BACKEND must be one of {SUPPORTED_STORAGE_BACKENDS}, "
            f"got '{settings.SESSION_STORAGE_BACKEND}'"
        )

    if backend == "file" and not settings.SESSION_STORAGE_PATH:
        problems.append("SESSION_STORAGE_PATH")

    return problems


def validate_optional_config() -> List[str]:
    """
    Validate optional but recommended configuration.
    Returns list of warnings.
    """
    warnings = []

    if settings.SESSION_STORAGE_BACKEND.lower() == "file":
        directory = os.path.dirname(os.path.abspath(settings.SESSION_STORAGE_PATH))
        if not os.path.isdir(directory):
            warnings.append(f"SESSION_STORAGE_PATH directory does not exist yet: {directory}")

    if settings.LOGIN_DELAY_SECONDS > 5:
        warnings.append(f"LOGIN_DELAY_SECONDS is unusually high ({settings.LOGIN_DELAY_SECONDS}s)")

    return warnings


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is invalid.
    Logs warnings for optional config.
    """
    problems = validate_required_config()
    warnings = validate_optional_config()

    if problems:
        error_msg = f"Invalid configuration: {', '.join(problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")

    logger.info("Configuration validation passed")
