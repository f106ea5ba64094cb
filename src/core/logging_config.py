"""
Configures application-wide logging for the fee calculator CLI and pipeline.
"""
import logging
import sys

def setup_logging(level=logging.INFO, log_to_file: bool = False, log_filename: str = "nursery_fees.log"):
    """
    Configures the root logger.

    Args:
        level: Minimum logging level, as an int or a name such as "DEBUG".
        log_to_file: If True, logs are also appended to ``log_filename``.
        log_filename: File to log to when ``log_to_file`` is set.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-8s] [%(name)-18s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # drop handlers from an earlier call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_filename, mode="a")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info("Logging configured. Level: %s. Output to console and '%s'.",
                     logging.getLevelName(level), log_filename)
    else:
        logging.info("Logging configured. Level: %s. Output to console.", logging.getLevelName(level))
