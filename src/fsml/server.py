"""aiohttp server for FSML.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from fsml.api.config import create_config_routes
from fsml.api.navigation import create_navigation_routes
from fsml.api.reorder import create_reorder_routes
from fsml.app_keys import config_key, nav_config_key
from fsml.config import Config

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[nav_config_key] = config.navigation

    app.router.add_routes(create_config_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_reorder_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving FSML API on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port)
