"""
binned_kfold.utils.logging

Logging utilities shared by the fold builders, the analysis helpers and the CLI.
A single named logger is configured once so repeated imports do not duplicate output.
"""

import logging
import sys

# Define a global logger name
LOGGER_NAME = "binned_kfold"

def setup_logger(name: str = LOGGER_NAME, log_level: str = "INFO") -> logging.Logger:
    """
    Sets up a logger if it hasn't been configured yet.
    
    Args:
        name (str): Name of the logger.
        log_level (str): Log level.
        
    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level.upper())
    
    # Check if handlers already exist to avoid duplicate logs
    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
        
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
        
        logger.propagate = False

    return logger

_logger = setup_logger()

def set_level(log_level: str) -> None:
    """Change the verbosity of the package logger (e.g. from the CLI)."""
    _logger.setLevel(log_level.upper())

def log(msg: str, level: str = "INFO") -> None:
    """
    Log a message using the global singleton logger.

    Args:
        msg (str): The log message.
        level (str, optional): DEBUG, INFO, WARNING, ERROR or CRITICAL. Default is 'INFO'.
    """
    log_func = getattr(_logger, level.lower(), _logger.info)
    log_func(msg)
