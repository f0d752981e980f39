"""Logging configuration for the PG filter engine."""

import logging


def get_logger(name: str = "pg_filters") -> logging.Logger:
    """
    Get a logger instance.

    Handlers and levels are left to the host application; every engine
    logger sits under ``pg_filters`` so it can be configured in one place.

    Args:
        name: Logger name (will be prefixed with 'pg_filters.')

    Returns:
        Logger instance
    """
    if name == "pg_filters":
        return logging.getLogger(name)
    return logging.getLogger(f"pg_filters.{name}")
