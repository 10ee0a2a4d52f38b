"""
Logging configuration with daily file rotation and automatic cleanup.
"""
import os
import logging
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime, timedelta
from pathlib import Path


LOGS_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"))
LOG_FILE_NAME = "pets-api.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_RETENTION_DAYS = 10


def cleanup_old_logs(directory: str, retention_days: int = LOG_RETENTION_DAYS):
    """Remove rotated log files older than retention_days."""
    log_dir = Path(directory)
    if not log_dir.exists():
        return

    cutoff = datetime.now() - timedelta(days=retention_days)
    deleted_count = 0
    for log_file in log_dir.glob(f"{LOG_FILE_NAME}.*"):
        if not log_file.is_file():
            continue
        # Rotated files are suffixed with YYYY-MM-DD; anything else goes by mtime
        try:
            file_date = datetime.strptime(log_file.name.replace(f"{LOG_FILE_NAME}.", ""), "%Y-%m-%d")
        except ValueError:
            file_date = datetime.fromtimestamp(log_file.stat().st_mtime)
        if file_date < cutoff:
            try:
                log_file.unlink()
                deleted_count += 1
            except OSError as e:
                logging.error(f"Failed to delete log file {log_file.name}: {e}")

    if deleted_count > 0:
        logging.info(f"Cleaned up {deleted_count} old log file(s)")


def setup_logger(name: str = "app", level: int = logging.INFO) -> logging.Logger:
    """
    Set up logger with file rotation and console output.

    Args:
        name: Logger name
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", "%H:%M:%S")
    )
    logger.addHandler(console_handler)

    try:
        os.makedirs(LOGS_DIR, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(LOGS_DIR, LOG_FILE_NAME),
            when="midnight",
            interval=1,
            backupCount=LOG_RETENTION_DAYS,
            encoding="utf-8",
            utc=True
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        logger.addHandler(file_handler)
        cleanup_old_logs(LOGS_DIR, LOG_RETENTION_DAYS)
    except OSError as e:
        logger.warning(f"File logging disabled, could not use {LOGS_DIR}: {e}")

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (if None, returns the root app logger)

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("app")
    return logging.getLogger(f"app.{name}")


# Create default application logger
app_logger = setup_logger("app", logging.INFO)
app_logger.info(f"Application logger initialized (log dir: {LOGS_DIR}, retention: {LOG_RETENTION_DAYS} days)")
