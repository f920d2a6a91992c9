"""Navigation API endpoints.

Provides navigation tree, path parsing and path sorting endpoints.
Paths always come from the request body; nothing is read from disk.
"""

from aiohttp import web

from fsml.api.requests import RequestError, read_body, require_string, require_string_list
from fsml.app_keys import nav_config_key
from fsml.core.navigation import build_nav_tree, find_node
from fsml.core.paths import parse_path
from fsml.core.sorting import sort_paths


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.post("/api/navigation", post_navigation),
        web.post("/api/paths/parse", post_parse_path),
        web.post("/api/paths/sort", post_sort_paths),
    ]


async def post_navigation(request: web.Request) -> web.Response:
    try:
        data = await read_body(request)
        paths = require_string_list(data, "paths")
        root = data.get("root")
        if root is not None and not isinstance(root, str):
            raise RequestError("root must be a string", field="root")
    except RequestError as e:
        return e.to_response()

    items = build_nav_tree(paths, request.app[nav_config_key])

    if root:
        section = find_node(items, root)
        if section is None or not section.is_folder:
            return web.json_response(
                {"error": "Section not found", "path": root},
                status=404,
            )
        items = section.children

    return web.json_response({"items": [item.to_dict() for item in items]})


async def post_parse_path(request: web.Request) -> web.Response:
    try:
        data = await read_body(request)
        path = require_string(data, "path")
    except RequestError as e:
        return e.to_response()

    return web.json_response(parse_path(path).to_dict())


async def post_sort_paths(request: web.Request) -> web.Response:
    try:
        data = await read_body(request)
        paths = require_string_list(data, "paths")
    except RequestError as e:
        return e.to_response()

    return web.json_response({"paths": sort_paths(paths)})
