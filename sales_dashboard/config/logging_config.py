# sales_dashboard/config/logging_config.py
"""
Logging configuration for the dashboard API
"""

from loguru import logger
import sys
from pathlib import Path

from .setting import settings

QUERY_MODULES = ("param_normalizer", "filter_compiler", "sort_resolver", "pagination", "query_builder")


def setup_logging(level: str = None, log_dir: str = None, to_file: bool = None):
    """
    Configure loguru for file and console logging
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = Path(log_dir or settings.LOG_DIR)
    to_file = settings.LOG_TO_FILE if to_file is None else to_file

    # Remove default handler
    logger.remove()

    # Console handler with color formatting
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )

    if not to_file:
        logger.info("Logging system initialized (console only)")
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    # File handler - Daily rotation
    logger.add(
        str(log_dir / "sales_api_{time:YYYY-MM-DD}.log"),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
        compression="zip"
    )

    # Error-specific log file
    logger.add(
        str(log_dir / "errors_{time:YYYY-MM-DD}.log"),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR",
        rotation="1 day",
        retention="60 days",  # Keep errors longer
        compression="zip"
    )

    # Query construction logs (for debugging filters)
    logger.add(
        str(log_dir / "queries_{time:YYYY-MM-DD}.log"),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        filter=lambda record: any(module in record["name"] for module in QUERY_MODULES),
        rotation="1 day",
        retention="14 days",
        level="DEBUG"
    )

    logger.info("Logging system initialized successfully")
    return logger


def log_query_performance(endpoint: str, duration: float, results_count: int):
    """Log query performance metrics"""
    logger.info(f"PERFORMANCE | Endpoint: {endpoint} | Duration: {duration:.3f}s | Results: {results_count}")
