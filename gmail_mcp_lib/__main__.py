"""Command-line entry point: ``gmail-mcp-lib`` or ``python -m gmail_mcp_lib``."""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

# TRANSPORT value -> FastMCP transport name
TRANSPORTS = {
    "stdio": "stdio",
    "streamable-http": "streamable-http",
    "http": "streamable-http",
}

NOISY_LOGGERS = ("googleapiclient", "googleapiclient.discovery_cache", "google.auth")


def configure_logging() -> None:
    """Send log records to stderr at ``LOG_LEVEL`` (default INFO).

    stdout belongs to the STDIO transport's JSON-RPC stream.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def validate_environment() -> bool:
    """Check the OAuth client settings used for token refresh.

    Tokens are resolved per call, so a missing setting is only warned about:
    an unexpired access token works without them.

    Returns:
        True when ``GOOGLE_CLIENT_ID`` and ``GOOGLE_CLIENT_SECRET`` are set.
    """
    logger = logging.getLogger(__name__)

    missing = [
        name for name in ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET") if not os.getenv(name)
    ]
    if missing:
        logger.warning(
            "%s not set; expired access tokens cannot be refreshed", " and ".join(missing)
        )
        return False

    return True


def main() -> None:
    """Load ``.env``, configure logging and serve over the selected transport."""
    load_dotenv()

    configure_logging()
    logger = logging.getLogger(__name__)

    validate_environment()

    from gmail_mcp_lib.server import mcp

    requested = os.getenv("TRANSPORT", "stdio").strip().lower()
    transport = TRANSPORTS.get(requested)
    if transport is None:
        logger.warning("Unknown TRANSPORT %r, using stdio", requested)
        transport = "stdio"

    logger.info("Starting Gmail MCP server (transport=%s)", transport)
    try:
        mcp.run(transport=transport)  # type: ignore[arg-type]
    except Exception:
        logger.exception("Gmail MCP server stopped with an error")
        sys.exit(1)


if __name__ == "__main__":
    main()
