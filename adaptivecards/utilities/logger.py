"""
Logger module for adaptivecards.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('adaptivecards')
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam

def set_log_level(level: int) -> None:
    """Set the logging level for the package.
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
