import logging
import sys

PACKAGE_LOGGER = "sts_evaluation"


def setup_logging(level: str = "INFO") -> None:
    """
    Send the package's log records to stderr, keeping stdout for reports.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Repeated calls replace the handler instead of duplicating output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(handler)
