"""
Logging configuration and utilities for the FinPlan core.
"""
from .config import configure_logging, get_fetch_logger, get_logger, log_fetch_outcome

__all__ = ["configure_logging", "get_fetch_logger", "get_logger", "log_fetch_outcome"]
