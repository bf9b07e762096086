"""
Logging setup for the API process.

``setup_logging`` attaches a console handler to the root logger once. Modules
log through ``logging.getLogger(__name__)`` and never configure handlers
themselves.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger if nothing else has done so yet."""
    logger = logging.getLogger()
    if logger.handlers:
        # pytest and uvicorn install their own handlers
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
