"""Entry point for the admin console.

Starts the FastAPI console with Uvicorn.  Host and port are read from
the ``ADMIN_HOST`` and ``ADMIN_PORT`` environment variables; all other
configuration is described in ``slshopping_admin.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from slshopping_admin.app.main import app as admin_app


async def run_admin() -> None:
    """Serve the admin console until interrupted.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    admin_host = os.getenv("ADMIN_HOST", "0.0.0.0")
    admin_port = int(os.getenv("ADMIN_PORT", "8000"))
    config = Config(app=admin_app, host=admin_host, port=admin_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_admin())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Admin console stopped")
