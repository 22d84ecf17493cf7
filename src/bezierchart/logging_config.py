"""
Logging Configuration
Sets up the 'bezierchart' logger for the application.

What gets logged:
    - INFO: application start-up.
    - DEBUG (bezierchart.model): every geometry build with its value, segment
      and marker counts, empty series and the zero-scale baseline policy.
    - DEBUG (bezierchart.app): settings changes that rebuilt the geometry and
      empty redraws of the chart widget.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "bezierchart"
APP_LOGGER_NAME = "bezierchart.app"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    trace_geometry: bool = False
) -> logging.Logger:
    """
    Configures the logger for the 'bezierchart' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        trace_geometry: Show the geometry builder's DEBUG records (one per
            rebuild) while the rest of the package stays at `level`.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if trace_geometry else level)

    # Avoid duplicate logs when the app is restarted in the same interpreter
    if logger.hasHandlers():
        logger.handlers.clear()

    # While tracing, only the app layer stays at the requested level
    logging.getLogger(APP_LOGGER_NAME).setLevel(level if trace_geometry else logging.NOTSET)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handler_level = logging.DEBUG if trace_geometry else level

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(handler_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
