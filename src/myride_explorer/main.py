"""Main entry point: serve the edge relay."""

import asyncio
import logging
import sys

import aiohttp
import uvicorn

from myride_explorer.adapters.config import AppConfig
from myride_explorer.adapters.web import create_app

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the entry points."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_relay_session() -> aiohttp.ClientSession:
    """Create the upstream session for the relay.

    Cookies belong to the browsers behind the relay, so the session keeps
    none; bodies pass through still encoded; no timeout is applied.
    """
    return aiohttp.ClientSession(
        cookie_jar=aiohttp.DummyCookieJar(),
        auto_decompress=False,
        timeout=aiohttp.ClientTimeout(total=None),
    )


async def main(config: AppConfig | None = None) -> None:
    """Run the relay server until interrupted."""
    config = config or AppConfig()
    configure_logging(config.log_level)

    async with create_relay_session() as session:
        app = create_app(config, session)
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_level=config.log_level.lower(),
            )
        )
        logger.info(f"Starting {config.title} relay on {config.host}:{config.port}")
        try:
            await server.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            server.should_exit = True


if __name__ == "__main__":
    asyncio.run(main())
