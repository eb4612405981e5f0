#!/usr/bin/env python3
"""Main entry point for the uidgen service.

This module loads settings, builds the identifier generator and starts the
HTTP server.
"""

import logging
import os
import sys
from pathlib import Path

from uidgen.app import run_server
from uidgen.generator import UIDGenerator
from uidgen.settings import Settings, SettingsError

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the application."""
    logger.info("Starting uidgen service...")

    try:
        # Load settings from environment variables and config file
        logger.info("Loading settings...")
        config_file = "config.toml" if Path("config.toml").exists() else None
        settings = Settings.from_env_and_file(config_file)
        logger.info(f"Settings loaded: {settings}")

        # Initialize UIDGenerator
        logger.info("Initializing ID generator...")
        generator = UIDGenerator(settings.generator_config())
        logger.info(f"ID generator initialized: {generator}")

        logger.info(f"Starting HTTP server on port {settings.listen_port}...")
        logger.info("Service is ready to accept requests")

        run_server(settings, generator)

    except SettingsError as e:
        logger.error(f"Settings error: {e}")
        logger.error("Please check your configuration and try again")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unexpected error during startup: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
