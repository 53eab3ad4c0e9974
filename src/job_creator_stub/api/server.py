"""
HTTP Server Entry Point

Runs the stub with uvicorn on BIND_ADDR (default ":20100").

Usage:
    $ job-creator-stub
    $ BIND_ADDR=127.0.0.1:8080 python -m job_creator_stub
"""

import logging
import sys

import uvicorn

from job_creator_stub.shared.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Start the server and block until it stops.

    Returns:
        Process exit code (2 when configuration is invalid)
    """
    try:
        settings = get_settings()
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)

    logger.info(
        f"Starting server: namespace={settings.service_namespace} "
        f"bind_addr={settings.bind_addr}"
    )

    # Serve the module-level app so exactly one registry exists
    uvicorn.run(
        "job_creator_stub.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
