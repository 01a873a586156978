"""Composition root for the invoice engine.

This module is the only location that imports both configuration and
concrete adapter implementations. Wiring of settings into adapters
happens here.
"""

import logging
import sys

from invoice_engine.adapters.report.text import TextStatementRenderer
from invoice_engine.config import Settings, load_settings


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )


def create_statement_renderer(settings: Settings) -> TextStatementRenderer:
    """Build a statement renderer from settings."""
    return TextStatementRenderer(
        indent=settings.report_indent,
        precision=settings.report_precision,
        currency=settings.report_currency,
    )


def bootstrap(env_file: str | None = None) -> TextStatementRenderer:
    """Load configuration, configure logging and wire the renderer.

    Args:
        env_file: Optional .env file to load settings from.

    Returns:
        Renderer configured from settings.

    Raises:
        ValidationError: If settings validation fails.
    """
    settings = load_settings(env_file)

    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading invoice engine...")

    renderer = create_statement_renderer(settings)
    logger.info(
        f"Statement renderer: indent={renderer.indent}, precision={renderer.precision}"
    )
    return renderer
