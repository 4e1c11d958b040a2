"""Server entry point — ``python -m vibehealth.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from vibehealth.core.config.settings import get_settings
from vibehealth.core.server.app import create_app


def _is_loopback_host(host: str) -> bool:
    if host in {"localhost"}:
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def run() -> None:
    """Start the VibeHealth MCP server with Streamable HTTP transport."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.vibe_log_level.upper(), logging.INFO))

    logger = logging.getLogger(__name__)
    if not settings.vibe_allow_insecure_bind and not _is_loopback_host(settings.vibe_host):
        raise RuntimeError(
            "Refusing to bind the server to a non-loopback host without an auth layer. "
            "Set VIBE_ALLOW_INSECURE_BIND=true to override (unsafe)."
        )
    logger.info(
        "Starting VibeHealth Lifestyle server on %s:%d",
        settings.vibe_host,
        settings.vibe_port,
    )

    mcp = create_app()
    mcp.run(
        transport="streamable-http",
        host=settings.vibe_host,
        port=settings.vibe_port,
    )


if __name__ == "__main__":
    run()
