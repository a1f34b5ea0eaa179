"""
Welcome Bot - Keep-Alive Server
===============================

HTTP liveness endpoint for the hosting platform.

DESIGN:
    The hosting platform pings the root path to decide whether the
    process is alive. The response is static and does not depend on the
    gateway connection, so the server is started before login and keeps
    answering while the bot reconnects.

    Uses aiohttp's AppRunner so the listener shares the bot's event loop.
"""

from typing import Optional

from aiohttp import web

from welcomebot.core.logger import logger


RUNNING_MESSAGE = "Discord Bot is running!"
"""Fixed body returned for every liveness request."""


# =============================================================================
# Keep-Alive Server
# =============================================================================

class KeepAliveServer:
    """
    Minimal aiohttp server answering liveness probes.

    Attributes:
        port: Port number for the HTTP server.
        host: Interface to bind to.
        app: aiohttp Application instance.
        runner: aiohttp AppRunner for lifecycle management.
    """

    def __init__(self, port: int, host: str = "0.0.0.0") -> None:
        self.port = port
        self.host = host
        self.app = create_app()
        self.runner: Optional[web.AppRunner] = None

    async def start(self) -> None:
        """
        Bind and start serving.

        Raises:
            OSError: If the listener cannot bind. The caller treats this
                as fatal.
        """
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()
        site = web.TCPSite(self.runner, self.host, self.port)
        try:
            await site.start()
        except OSError as e:
            logger.error("Keep-Alive Server Failed To Bind", [
                ("Host", self.host),
                ("Port", str(self.port)),
                ("Error", str(e)[:100]),
            ])
            await self.runner.cleanup()
            self.runner = None
            raise

        logger.tree("Keep-Alive Server Started", [
            ("Port", str(self.port)),
            ("Endpoint", f"http://{self.host}:{self.port}/"),
        ], emoji="✅")

    async def stop(self) -> None:
        """Stop the server. Safe to call even if it never started."""
        if self.runner:
            await self.runner.cleanup()
            self.runner = None
            logger.info("Keep-alive server stopped")


async def running_handler(request: web.Request) -> web.Response:
    return web.Response(text=RUNNING_MESSAGE, content_type="text/plain")


def create_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", running_handler)
    return app


__all__ = ["KeepAliveServer", "RUNNING_MESSAGE", "create_app"]
