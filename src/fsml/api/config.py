"""Config API endpoint."""

from aiohttp import web

from fsml.app_keys import config_key, nav_config_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    nav_config = request.app[nav_config_key]
    server_config = request.app[config_key].server
    return web.json_response(
        {
            "indexFilenames": sorted(nav_config.index_filenames),
            "rootManifest": nav_config.root_manifest,
            "server": {"host": server_config.host, "port": server_config.port},
        },
    )
