"""Main module entrypoint for local and in-cluster runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging
import os

import uvicorn

from appinfo.bootstrap import bootstrap_create_application
from appinfo.config import SettingsLoadError, config_configure_logging, config_load_settings, config_parse_http_address
from appinfo.service import AppInfoVersionError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Start the HTTP server with validated startup configuration.

    Args:
        argv: Command-line arguments. Defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when startup configuration is invalid.
    """

    argument_parser = argparse.ArgumentParser(description="Canary app info service")
    argument_parser.add_argument(
        "--http-addr",
        dest="http_addr",
        type=str,
        help="Address to host server, e.g. `:8080`. Overrides APPLICATION_HOST and APPLICATION_PORT",
    )
    argument_parser.add_argument(
        "--version",
        dest="app_version",
        type=int,
        help="Version of app: 1 baseline, 2 broken, 3 namespace fix. Overrides APP_VERSION",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        overrides: dict[str, object] = {"app_version": parsed_arguments.app_version}
        if parsed_arguments.http_addr is not None:
            host, port = config_parse_http_address(parsed_arguments.http_addr)
            overrides.update(application_host=host, application_port=port)
        settings = config_load_settings(**overrides)
    except SettingsLoadError as error:
        config_configure_logging()
        logger.critical("Error loading settings: %s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    main_log_environment()

    try:
        application = bootstrap_create_application(settings)
    except AppInfoVersionError as error:
        logger.critical("Error creating service: %s", error)
        raise SystemExit(1) from error

    logger.info(
        "Starting server @ %s:%s version=%s",
        settings.application_host,
        settings.application_port,
        settings.app_version,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


def main_log_environment() -> None:
    """Log every process environment variable.

    Returns:
        None: Writes log records as side effect.
    """

    logger.info("Environment Variables:")
    for name, value in sorted(os.environ.items()):
        logger.info("%s=%s", name, value)


if __name__ == "__main__":
    main()
