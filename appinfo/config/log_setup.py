"""Process-wide logging configuration."""

import logging
import sys

CONFIG_LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s caller=%(filename)s:%(lineno)d logger=%(name)s msg=%(message)s"


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a logfmt-style line format on stdout.

    Args:
        level: Standard library logging level name.

    Returns:
        None: Logging handlers are replaced as side effect.
    """

    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=CONFIG_LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        force=True,
    )
